"""
Тесты интеграции NonNegative с Pydantic

Проверяет:
1. Валидацию полей моделей (повторный try_new на входе)
2. Сериализацию в голое число (python и JSON режимы)
3. Представление из параметра типа NonNegative[np.float32]
4. JSON Schema, генерируемую pydantic
"""

import json
import math

import numpy as np
import pytest
from pydantic import BaseModel, TypeAdapter, ValidationError

from nonneg_float import NonNegative

# =============================================================================
# FIXTURES
# =============================================================================


class Measurement(BaseModel):
    """Модель с неотрицательными полями"""

    distance: NonNegative
    weight: NonNegative[np.float32] = NonNegative.zero(np.float32)

    model_config = {"frozen": True}


# =============================================================================
# VALIDATION
# =============================================================================


class TestValidation:
    """Декодирование повторно проверяет инвариант"""

    def test_number_accepted(self) -> None:
        m = Measurement(distance=12.5)
        assert m.distance == NonNegative(12.5)

    def test_instance_accepted(self) -> None:
        m = Measurement(distance=NonNegative(3.0))
        assert m.distance.get() == 3.0

    def test_int_accepted(self) -> None:
        assert Measurement(distance=4).distance.get() == 4.0

    @pytest.mark.parametrize("value", [-1.0, math.nan, math.inf, -math.inf])
    def test_invalid_number_rejected(self, value: float) -> None:
        with pytest.raises(ValidationError):
            Measurement(distance=value)

    def test_non_numeric_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Measurement(distance="far")

    def test_error_message_mentions_invariant(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            Measurement(distance=-0.5)

        assert "non-negative and finite" in str(exc_info.value)

    def test_typed_field_uses_representation(self) -> None:
        m = Measurement(distance=1.0, weight=2.5)
        assert type(m.weight.get()) is np.float32
        assert m.weight == NonNegative(2.5, np.float32)

    def test_typed_field_overflow_rejected(self) -> None:
        """1e39 не помещается в float32"""
        with pytest.raises(ValidationError):
            Measurement(distance=1.0, weight=1e39)

    def test_type_adapter(self) -> None:
        adapter = TypeAdapter(NonNegative)
        assert adapter.validate_python(0.75) == NonNegative(0.75)
        with pytest.raises(ValidationError):
            adapter.validate_python(-0.75)

    @pytest.mark.parametrize("value", [True, False, "1.5", "0", None])
    def test_decoding_as_strict_as_constructor(self, value) -> None:
        """bool и строки отклоняются так же, как в NonNegative(...)"""
        with pytest.raises(TypeError):
            NonNegative(value)
        with pytest.raises(ValidationError) as exc_info:
            TypeAdapter(NonNegative).validate_python(value)

        assert exc_info.value.errors()[0]["type"] == "non_negative_type"

    def test_json_string_number_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Measurement.model_validate_json('{"distance": "1.5"}')

    def test_numpy_instance_keeps_precision(self) -> None:
        """Скаляр numpy передаётся в try_new без приведения к float"""
        result = TypeAdapter(NonNegative).validate_python(np.float32(2.5))
        assert type(result.get()) is np.float32


# =============================================================================
# SERIALIZATION
# =============================================================================


class TestSerialization:
    """Закодированная форма — голое число"""

    def test_model_dump_bare_number(self) -> None:
        dumped = Measurement(distance=12.5).model_dump()
        assert dumped["distance"] == 12.5
        assert type(dumped["distance"]) is float

    def test_model_dump_keeps_numpy_value(self) -> None:
        dumped = Measurement(distance=1.0, weight=2.5).model_dump()
        assert type(dumped["weight"]) is np.float32

    def test_model_dump_json_bare_number(self) -> None:
        payload = json.loads(Measurement(distance=12.5, weight=2.5).model_dump_json())
        assert payload == {"distance": 12.5, "weight": 2.5}

    def test_json_roundtrip(self) -> None:
        original = Measurement(distance=0.1, weight=3.14)
        restored = Measurement.model_validate_json(original.model_dump_json())
        assert restored == original

    def test_json_decode_revalidates(self) -> None:
        with pytest.raises(ValidationError):
            Measurement.model_validate_json('{"distance": -3}')


# =============================================================================
# JSON SCHEMA
# =============================================================================


class TestJsonSchema:
    """JSON Schema, генерируемая pydantic"""

    def test_type_adapter_schema(self) -> None:
        schema = TypeAdapter(NonNegative).json_schema()
        assert schema["type"] == "number"
        assert schema["minimum"] == 0

    def test_model_schema_field(self) -> None:
        properties = Measurement.model_json_schema()["properties"]
        assert properties["distance"]["minimum"] == 0
        assert properties["weight"]["type"] == "number"
