"""
ArithmeticContext: конфигурация алгоритмов умножения

Immutable Pydantic модель, хранящая настраиваемые параметры движка.
Контекст передаётся в точку входа умножения явно; процесс-глобального
изменяемого порога нет.

Параметры:
- karatsuba_threshold: длина в лимбах, начиная с которой dispatcher
  выбирает Karatsuba вместо schoolbook
- karatsuba_max_depth: глубина рекурсии Karatsuba, после которой все
  подпроизведения считаются schoolbook (ограничение native стека)
"""

import logging
from typing import Any, Final, Mapping

from jsonschema import ValidationError
from pydantic import BaseModel, Field

from bignum.core.contracts import ArithmeticContextValidator

logger = logging.getLogger(__name__)

# =============================================================================
# ЗНАЧЕНИЯ ПО УМОЛЧАНИЮ
# =============================================================================

# Порог переключения schoolbook → Karatsuba (лимбы).
# Эмпирический диапазон оптимума 70-320 лимбов в зависимости от платформы.
KARATSUBA_THRESHOLD_DEFAULT: Final[int] = 80

# Максимальная глубина рекурсии Karatsuba.
# При пороге >= 2 глубина растёт как log2(n), 48 уровней покрывают
# любые реалистичные величины.
KARATSUBA_MAX_DEPTH_DEFAULT: Final[int] = 48


# =============================================================================
# CONTEXT MODEL
# =============================================================================


class ArithmeticContext(BaseModel):
    """
    Контекст арифметических операций.

    Immutable модель (frozen=True): изменение параметров создаёт новый
    экземпляр через with_threshold / from_profile.
    """

    karatsuba_threshold: int = Field(
        KARATSUBA_THRESHOLD_DEFAULT,
        ge=1,
        description="Длина (лимбы), начиная с которой используется Karatsuba",
    )
    karatsuba_max_depth: int = Field(
        KARATSUBA_MAX_DEPTH_DEFAULT,
        ge=0,
        description="Глубина рекурсии Karatsuba до перехода на schoolbook",
    )

    model_config = {"frozen": True, "extra": "forbid"}

    def uses_karatsuba(self, length: int, depth: int = 0) -> bool:
        """
        Выбор алгоритма для операндов максимальной длины length.

        Args:
            length: max(len(a), len(b)) в лимбах
            depth: Текущая глубина рекурсии Karatsuba

        Returns:
            True если следует использовать Karatsuba
        """
        return length >= self.karatsuba_threshold and depth < self.karatsuba_max_depth

    def with_threshold(self, threshold: int) -> "ArithmeticContext":
        """
        Копия контекста с другим порогом Karatsuba.

        Raises:
            pydantic.ValidationError: Если threshold < 1
        """
        return ArithmeticContext(
            karatsuba_threshold=threshold,
            karatsuba_max_depth=self.karatsuba_max_depth,
        )

    @classmethod
    def from_profile(cls, profile: Mapping[str, Any]) -> "ArithmeticContext":
        """
        Построение контекста из tuning profile (например, результата
        внешнего benchmark harness).

        Профиль сначала проверяется JSON Schema контрактом, затем
        Pydantic моделью.

        Args:
            profile: dict с ключами karatsuba_threshold, karatsuba_max_depth
                (опционально) и произвольными метаданными в "source"

        Raises:
            jsonschema.ValidationError: Если профиль нарушает контракт
        """
        document = dict(profile)
        validator = ArithmeticContextValidator()
        try:
            validator.validate(document)
        except ValidationError:
            logger.warning(
                "rejected tuning profile: %s", "; ".join(validator.describe_errors(document))
            )
            raise
        fields = {key: profile[key] for key in cls.model_fields if key in profile}
        context = cls(**fields)
        logger.info(
            "arithmetic context loaded from profile: threshold=%d max_depth=%d",
            context.karatsuba_threshold,
            context.karatsuba_max_depth,
        )
        return context


# Контекст по умолчанию для операторов BigUInt / BigInt (read-only)
DEFAULT_CONTEXT: Final[ArithmeticContext] = ArithmeticContext()
