import pytest

from geospatial.reference_data import (
    DATUM_SHIFTS,
    STANDARD_ELLIPSOIDS,
    EllipsoidID,
    find_datums_by_name,
    lookup_datum_shift,
    lookup_standard_ellipsoid,
)


def test_ellipsoid_table_matches_ids():
    assert len(STANDARD_ELLIPSOIDS) == 23
    for member in EllipsoidID:
        assert STANDARD_ELLIPSOIDS[member].code == EllipsoidID(member.value).name


def test_common_name_aliases():
    assert EllipsoidID.GRS80 is EllipsoidID.RF
    assert EllipsoidID.INT24 is EllipsoidID.IN
    assert EllipsoidID.WGS84 is EllipsoidID.WE
    assert lookup_standard_ellipsoid(EllipsoidID.GRS80).name == "Geodetic Reference System 1980"
    assert lookup_standard_ellipsoid(EllipsoidID.CLARKE_1866).a == 6378206.4


def test_wgs84_eccentricity():
    wgs84 = lookup_standard_ellipsoid("we")
    assert wgs84.e2 == pytest.approx(0.00669437999014, rel=1e-12)
    model = wgs84.model
    assert model.a == 6378137.0
    assert model.name == "WE"


def test_int24_matches_dma_tables():
    assert lookup_standard_ellipsoid(EllipsoidID.INT24).e2 == pytest.approx(0.006722670022, rel=1e-9)


@pytest.mark.parametrize("identifier", [-1, 23, 99, "ZZ"])
def test_unknown_ellipsoid_falls_back_to_wgs84(identifier):
    assert lookup_standard_ellipsoid(identifier).code == "WE"


def test_datum_table_size_and_ends():
    assert len(DATUM_SHIFTS) == 227
    assert DATUM_SHIFTS[0].code == "ADI-M"
    assert DATUM_SHIFTS[-1].code == "YAC"
    assert len({datum.code for datum in DATUM_SHIFTS}) == len(DATUM_SHIFTS)


def test_lookup_datum_by_code_and_index():
    nas = lookup_datum_shift("nas-c")
    assert nas.shift == (-8, 160, 176)
    assert nas.ellipsoid.code == "CC"
    assert lookup_datum_shift(0) is DATUM_SHIFTS[0]

    eur = lookup_datum_shift("EUR-M")
    assert eur.ellipsoid_id is EllipsoidID.IN
    assert eur.shift == (-87, -98, -121)


def test_duplicate_datums_are_separate_records():
    first = lookup_datum_shift("TOY-B")
    second = lookup_datum_shift("TOY-B1")
    assert first.name == second.name == "TOKYO, South Korea"
    assert first.shift != second.shift


@pytest.mark.parametrize("identifier", [227, -1, "NOPE"])
def test_unknown_datum_raises(identifier):
    with pytest.raises(KeyError):
        lookup_datum_shift(identifier)


def test_find_datums_by_name():
    hawaii = find_datums_by_name("old hawaiian")
    assert len(hawaii) == 10
    assert {d.ellipsoid_id for d in hawaii} == {EllipsoidID.CC, EllipsoidID.IN}
    assert find_datums_by_name("no such datum") == []


def test_iwo_jima_beacon_datum():
    beacon = lookup_datum_shift("ATF")
    assert beacon.name == 'ASTRO BEACON "E", Iwo Jima'
    assert beacon.ellipsoid_id is EllipsoidID.IN
    assert beacon.shift == (145, 75, -272)
    assert DATUM_SHIFTS[DATUM_SHIFTS.index(lookup_datum_shift("AMA")) + 1] is beacon
