import math
import struct

import pytest

from wirestring.numfmt import atof, atol, dtostrf, itoa

FLT_MAX = struct.unpack("<f", b"\xff\xff\x7f\x7f")[0]
DBL_MAX = 1.7976931348623157e308

DBL_MAX_TEXT = (
    "179769313486231570814527423731704356798070567525844996598917476803157260780028538760589558"
    "632766878171540458953514382464234321326889464182768467546703537516986049910576551282076245"
    "490090389328944075868508455133942304583236903222948165808559332123348274797826204144723168"
    "738177180919299881250404026184124858368.00"
)


def test_dtostrf_two_decimals():
    assert dtostrf(1.234, 4, 2) == "1.23"
    assert dtostrf(5.678, 4, 2) == "5.68"


def test_dtostrf_flt_max():
    assert dtostrf(FLT_MAX, 4, 2) == "340282346638528859811704183484516925440.00"
    assert dtostrf(-FLT_MAX, 4, 2) == "-340282346638528859811704183484516925440.00"


def test_dtostrf_dbl_max():
    assert dtostrf(DBL_MAX, 4, 2) == DBL_MAX_TEXT
    assert dtostrf(-DBL_MAX, 4, 2) == "-" + DBL_MAX_TEXT


def test_dtostrf_special_values():
    assert dtostrf(float("nan"), 0, 2) == "nan"
    assert dtostrf(float("inf"), 0, 2) == "inf"


@pytest.mark.parametrize("width", [6, 10, 15])
def test_dtostrf_width_pads(width):
    right = dtostrf(1.5, width, 2)
    left = dtostrf(1.5, -width, 2)
    assert len(right) == width and len(left) == width
    assert right.strip() == left.strip() == dtostrf(1.5, 0, 2)
    assert right.endswith(dtostrf(1.5, 0, 2))
    assert left.startswith(dtostrf(1.5, 0, 2))


def test_dtostrf_negative_precision_rejected():
    with pytest.raises(ValueError):
        dtostrf(1.0, 4, -1)


@pytest.mark.parametrize("value", [0.0, 1.25, -3.5, 1234.0625])
def test_dtostrf_atof_round_trip(value):
    assert atof(dtostrf(value, 0, 6)) == value


def test_itoa_source_values():
    assert itoa(-1, 10) == "-1"
    assert itoa(1) == "1"
    assert itoa(ord("A"), 10) == "65"


def test_itoa_hex_lower_case():
    assert itoa(255, 16) == "ff"


@pytest.mark.parametrize("base", [2, 8, 10, 16, 36])
@pytest.mark.parametrize("value", [0, 7, 255, 65535, -42])
def test_itoa_round_trip(value, base):
    assert int(itoa(value, base), base) == value


@pytest.mark.parametrize("base", [0, 1, 37])
def test_itoa_bad_base(base):
    with pytest.raises(ValueError):
        itoa(10, base)


def test_atol_source_values():
    assert atol("") == 0
    assert atol("abc") == 0
    assert atol("-1") == -1


@pytest.mark.parametrize("value", [0, 17, -99999, 2**40])
def test_atol_round_trip(value):
    assert atol(str(value)) == value
    assert atol("  \t" + str(value) + "xyz") == value


def test_atof_no_number():
    assert atof("abc") == 0.0
    assert atof("") == 0.0


def test_atof_prefix_and_specials():
    assert atof("5.678") == 5.678
    assert atof("1e3xyz") == 1000.0
    assert atof("-inf") == -math.inf
    assert math.isnan(atof("nan"))


def test_atof_hex():
    assert atof(float.hex(0.75)) == 0.75