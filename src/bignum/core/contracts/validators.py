"""
Контракты tuning profile

Внешний benchmark harness измеряет время умножения для разных порогов
и сохраняет найденную конфигурацию как JSON документ. Перед тем как
построить из него ArithmeticContext, документ проверяется формальной
JSON Schema (Draft 2020-12), поставляемой внутри пакета.

Схемы:
- arithmetic_context.json: порог и глубина Karatsuba + метаданные замера
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator, List

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

SCHEMA_DIR = Path(__file__).parent / "schema"


# =============================================================================
# ЗАГРУЗКА СХЕМ
# =============================================================================


class SchemaLoader:
    """
    Загрузчик схем из каталога пакета.

    Каждая схема читается с диска один раз и проходит meta-validation
    до первого использования.
    """

    def __init__(self, schema_dir: Path = SCHEMA_DIR):
        if not schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {schema_dir}")
        self._schema_dir = schema_dir
        self._cache: Dict[str, Dict[str, Any]] = {}

    def available(self) -> List[str]:
        """Имена схем (без расширения), поставляемых с пакетом."""
        return sorted(path.stem for path in self._schema_dir.glob("*.json"))

    def load_schema(self, name: str) -> Dict[str, Any]:
        """
        Загрузка схемы по имени.

        Raises:
            FileNotFoundError: Схема с таким именем не поставляется
            ValueError: Файл не является корректной JSON Schema
        """
        cached = self._cache.get(name)
        if cached is not None:
            return cached

        path = self._schema_dir / f"{name}.json"
        if not path.is_file():
            raise FileNotFoundError(f"Schema not found: {path}")

        schema = json.loads(path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {path.name}: {e.message}") from e

        self._cache[name] = schema
        return schema


_LOADER = SchemaLoader()


# =============================================================================
# ВАЛИДАТОРЫ
# =============================================================================


class ContractValidator:
    """Проверка документа против одной схемы пакета."""

    def __init__(self, schema_name: str, loader: SchemaLoader = _LOADER):
        self.schema_name = schema_name
        self.schema = loader.load_schema(schema_name)
        self._validator = Draft202012Validator(self.schema)

    def validate(self, document: Dict[str, Any]) -> None:
        """
        Raises:
            jsonschema.ValidationError: Первое найденное нарушение
        """
        self._validator.validate(document)

    def is_valid(self, document: Dict[str, Any]) -> bool:
        return self._validator.is_valid(document)

    def iter_errors(self, document: Dict[str, Any]) -> Iterator[ValidationError]:
        return self._validator.iter_errors(document)

    def describe_errors(self, document: Dict[str, Any]) -> List[str]:
        """
        Все нарушения в виде строк "путь: сообщение".

        Examples:
            >>> ArithmeticContextValidator().describe_errors({"karatsuba_threshold": 0})
            ['karatsuba_threshold: 0 is less than the minimum of 1']
        """
        report = []
        for error in sorted(self.iter_errors(document), key=lambda e: list(e.absolute_path)):
            location = "/".join(str(part) for part in error.absolute_path) or "<root>"
            report.append(f"{location}: {error.message}")
        return report


class ArithmeticContextValidator(ContractValidator):
    """Контракт tuning profile для ArithmeticContext."""

    def __init__(self):
        super().__init__("arithmetic_context")


def validate_arithmetic_context(profile: Dict[str, Any]) -> None:
    """
    Проверка tuning profile перед построением ArithmeticContext.

    Raises:
        jsonschema.ValidationError: Если профиль нарушает контракт
    """
    ArithmeticContextValidator().validate(profile)
