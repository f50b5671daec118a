import decimal
import logging
import os
from dataclasses import dataclass, replace, asdict
from typing import Dict, Mapping, Optional

logger = logging.getLogger(__name__)

_ENV_PREFIX = 'QUERYLIST_'
_ROUNDING_MODES = {
    name: getattr(decimal, name) for name in (
        'ROUND_CEILING', 'ROUND_DOWN', 'ROUND_FLOOR', 'ROUND_HALF_DOWN',
        'ROUND_HALF_EVEN', 'ROUND_HALF_UP', 'ROUND_UP', 'ROUND_05UP'
    )
}
_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass(frozen=True)
class QueryListConfig:
    """process-wide settings for aggregation precision and logging"""
    decimal_precision: int = 28
    decimal_rounding: str = 'ROUND_HALF_EVEN'
    log_level: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.decimal_precision, int) or self.decimal_precision <= 0:
            raise ValueError(f"decimal_precision must be a positive integer, got {self.decimal_precision!r}")
        if self.decimal_rounding not in _ROUNDING_MODES:
            raise ValueError(f"unknown decimal_rounding: '{self.decimal_rounding}'")
        if self.log_level is not None and self.log_level.upper() not in _LOG_LEVELS:
            raise ValueError(f"unknown log_level: '{self.log_level}'")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'QueryListConfig':
        """build a config from QUERYLIST_* environment variables"""
        env = os.environ if environ is None else environ
        overrides: Dict[str, object] = {}
        if f'{_ENV_PREFIX}DECIMAL_PRECISION' in env:
            raw = env[f'{_ENV_PREFIX}DECIMAL_PRECISION']
            try:
                overrides['decimal_precision'] = int(raw)
            except ValueError:
                raise ValueError(f"{_ENV_PREFIX}DECIMAL_PRECISION must be an integer, got '{raw}'")
        if f'{_ENV_PREFIX}DECIMAL_ROUNDING' in env:
            overrides['decimal_rounding'] = env[f'{_ENV_PREFIX}DECIMAL_ROUNDING'].upper()
        if f'{_ENV_PREFIX}LOG_LEVEL' in env:
            overrides['log_level'] = env[f'{_ENV_PREFIX}LOG_LEVEL'].upper()
        return cls(**overrides)

    def decimal_context(self) -> decimal.Context:
        """
        a fresh decimal context carrying this config's precision and rounding.
        InvalidOperation is not trapped, so inf - inf gives NaN like float arithmetic.
        """
        return decimal.Context(prec=self.decimal_precision,
                               rounding=_ROUNDING_MODES[self.decimal_rounding],
                               traps=[decimal.DivisionByZero, decimal.Overflow])


_active: Optional[QueryListConfig] = None


def _apply_log_level(config: QueryListConfig) -> None:
    # None leaves the logger level to the application
    if config.log_level is None: return
    logging.getLogger('querylist').setLevel(config.log_level.upper())


def get_config() -> QueryListConfig:
    """return the active config, reading the environment on first use"""
    global _active
    if _active is None:
        _active = QueryListConfig.from_env()
        _apply_log_level(_active)
    return _active


def configure(**overrides) -> QueryListConfig:
    """replace fields of the active config and return the new one"""
    global _active
    _active = replace(get_config(), **overrides)
    _apply_log_level(_active)
    logger.debug(f"querylist configured: {asdict(_active)}")
    return _active


def reset_config() -> QueryListConfig:
    """forget programmatic overrides and re-read the environment"""
    global _active
    _active = None
    return get_config()
