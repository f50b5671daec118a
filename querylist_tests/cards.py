from dgen import from_schema
from querylist import QueryList


class TypeA:
    pass


class TypeB:
    pass


card_schema = {
    'age': ('pyint', {'min_value': 0, 'max_value': 30}),
    'email': 'email',
    'id': 'uuid4',
    'rating': ('pyint', {'min_value': 0, 'max_value': 100}),
}


def cards(count: int = 10, seed: int = 42) -> QueryList:
    """seeded cards; even positions carry a TypeA, odd positions a TypeB"""
    return from_schema(card_schema, seed=seed).take(count).select(
        lambda card, i: {**card, 'types': TypeA() if i % 2 == 0 else TypeB()})


def card_provider(seed: int = 7):
    return from_schema(card_schema, seed=seed)
