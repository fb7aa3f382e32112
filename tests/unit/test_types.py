from datetime import date
from decimal import Decimal

import pydantic
import pytest

from nem12lite.types import EnergyUnit, MeterRead, MeterVolume, Quality


def test_total_volume_empty_is_zero():
    assert MeterRead(nmi="1234567890").total_volume == Decimal(0)


def test_total_volume_is_exact():
    m = MeterRead(nmi="1234567890")
    m.append_volume(date(2025, 1, 1), MeterVolume(magnitude=Decimal("0.1"), quality=Quality.A))
    m.append_volume(date(2025, 1, 2), MeterVolume(magnitude=Decimal("0.2"), quality=Quality.E))
    assert m.total_volume == Decimal("0.3")


def test_identity_is_nmi_and_unit():
    a = MeterRead(nmi="1234567890", energy_unit=EnergyUnit.KWH)
    b = MeterRead(nmi="1234567890")
    b.append_volume(date(2025, 1, 1), MeterVolume(magnitude=Decimal(1), quality=Quality.A))
    assert a == b
    assert len({a, b}) == 1
    assert a != MeterRead(nmi="0987654321")


def test_meter_volume_is_immutable():
    v = MeterVolume(magnitude=Decimal("1.5"), quality=Quality.A)
    with pytest.raises(pydantic.ValidationError):
        v.magnitude = Decimal(2)


def test_meter_read_rejects_bad_nmi_length():
    with pytest.raises(pydantic.ValidationError):
        MeterRead(nmi="123")


def test_quality_actual_flag():
    assert Quality.A.is_actual
    assert not Quality.E.is_actual


def test_total_volume_keeps_more_than_28_digits():
    m = MeterRead(nmi="1234567890")
    m.append_volume(
        date(2025, 1, 1),
        MeterVolume(magnitude=Decimal("12345678901234567890.123456789"), quality=Quality.A),
    )
    m.append_volume(
        date(2025, 1, 2),
        MeterVolume(magnitude=Decimal("0.0000000001"), quality=Quality.E),
    )
    assert m.total_volume == Decimal("12345678901234567890.1234567891")
