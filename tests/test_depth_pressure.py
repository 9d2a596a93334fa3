from seawater_acoustics import depth_pressure, registry
from seawater_acoustics.errors import InvalidSelector, DomainWarning
from seawater_acoustics.regions import Region, get_region_info
import numpy as np
import pytest
import warnings

z = np.arange(0., 6001., 500.)

# Leroy & Parthiot (1998) fit depth->pressure and pressure->depth separately,
# each within the standard deviation given for the region, so a round trip
# stays within the sum of both over the depths found in the region.
# The published fits disagree by more than that in the deep Mediterranean
# (2.35 m at 5000 m), the deep Sea of Japan (0.56 m at 3700 m) and the upper
# Halmahera Basin (0.42 m at 160 m); those get the largest error of the fits.
# region, latitude inside its band, max depth [m], looser bound [m]
round_trips = [
    (Region.COMMON_OCEANS, 45., 6000., None),
    (Region.NORTH_EAST_ATLANTIC, 32., 6000., None),
    (Region.CIRCUMPOLAR_ANTARCTIC, -70., 6000., None),
    (Region.MEDITERRANEAN_SEA, 38., 5000., 2.4),
    (Region.RED_SEA, 20., 2800., None),
    (Region.ARCTIC_OCEAN, 80., 5000., None),
    (Region.SEA_OF_JAPAN, 40., 3700., 0.6),
    (Region.SULU_SEA, 8., 5500., None),
    (Region.HALMAHERA_BASIN, 0., 2000., 0.45),
    (Region.CELEBES_BASIN, 5., 6000., None),
    (Region.WEBER_DEEP, -5., 7000., None),
    (Region.BLACK_SEA, 44., 2200., None),
    (Region.BALTIC_SEA, 58., 450., None),
]

@pytest.mark.parametrize('region, lat, z_max, looser_bound', round_trips)
def test_leroy_parthiot_round_trip(region, lat, z_max, looser_bound):
    depths = np.arange(0., z_max + 1., 10.)
    info = get_region_info(region)
    max_error = looser_bound or info.pressure_std + info.depth_std
    with warnings.catch_warnings():
        warnings.simplefilter('error')
        p = depth_pressure.depth_to_pressure_leroy_parthiot_1998(depths, lat, region)
        z_back = depth_pressure.pressure_to_depth_leroy_parthiot_1998(p, lat, region)
    assert np.max(np.abs(z_back - depths)) < max_error

def test_leroy_parthiot_value():
    p = depth_pressure.depth_to_pressure_leroy_parthiot_1998(1000., 45.)
    assert np.isclose(p, 1009.099, atol=1e-3)

def test_leroy_parthiot_out_of_band_latitude_warns_but_computes():
    with pytest.warns(DomainWarning):
        p = depth_pressure.depth_to_pressure_leroy_parthiot_1998(1000., 0., region='baltic_sea')
    assert np.isfinite(p)
    with pytest.warns(DomainWarning):
        z = depth_pressure.pressure_to_depth_leroy_parthiot_1998(np.array([100., 1000.]), np.array([45., 70.]))
    assert z.shape == (2,)

def test_leroy_parthiot_invalid_region():
    with pytest.raises(InvalidSelector):
        depth_pressure.depth_to_pressure_leroy_parthiot_1998(1000., 45., region=13)
    with pytest.raises(InvalidSelector):
        depth_pressure.pressure_to_depth_leroy_parthiot_1998(1000., 45., region='north_sea')

@pytest.mark.parametrize('function', [depth_pressure.depth_to_pressure_leroy_1968,
                                      depth_pressure.depth_to_pressure_leroy_1988,
                                      depth_pressure.depth_to_pressure_lovett_1978,
                                      depth_pressure.depth_to_pressure_leroy_parthiot_1998])
def test_depth_to_pressure_close_to_leroy_parthiot(function):
    p = function(z, 45.)
    p_reference = depth_pressure.depth_to_pressure_leroy_parthiot_1998(z, 45.)
    assert p.shape == z.shape
    assert np.all(np.diff(p) > 0)
    assert np.max(np.abs(p - p_reference)) < 0.005*np.max(p_reference)

def test_pressure_to_depth_variants_close_to_leroy_parthiot():
    p = np.arange(0., 6001., 500.)
    z_reference = depth_pressure.pressure_to_depth_leroy_parthiot_1998(p, 45.)
    z_bisset_berman = depth_pressure.pressure_to_depth_bisset_berman_1971(p, 45.)
    z_ross = depth_pressure.pressure_to_depth_ross_1978(p)
    assert np.max(np.abs(z_bisset_berman - z_reference)) < 10.
    assert np.max(np.abs(z_ross - z_reference)) < 0.01*np.max(z_reference)

def test_leroy_1968_regions():
    p_common = depth_pressure.depth_to_pressure_leroy_1968(1000., 45., region=0)
    p_black = depth_pressure.depth_to_pressure_leroy_1968(1000., 45., region='black_sea')
    p_black_other_lat = depth_pressure.depth_to_pressure_leroy_1968(1000., 0., region=1)
    assert p_black == p_black_other_lat
    assert p_common != p_black
    with pytest.raises(InvalidSelector):
        depth_pressure.depth_to_pressure_leroy_1968(1000., 45., region=3)

def test_scalar_in_scalar_out():
    assert np.ndim(depth_pressure.pressure_to_depth_ross_1978(1000.)) == 0
    assert np.ndim(depth_pressure.depth_to_pressure_lovett_1978(1000., 45.)) == 0

def test_pressure_increases_with_latitude():
    p = depth_pressure.depth_to_pressure_leroy_1988(4000., np.array([0., 45., 90.]))
    assert np.all(np.diff(p) > 0)

def test_region_warning_points_at_caller():
    with pytest.warns(DomainWarning) as record:
        depth_pressure.depth_to_pressure_leroy_parthiot_1998(1000., 0., region='baltic_sea')
    assert record.pop(DomainWarning).filename == __file__
    with pytest.warns(DomainWarning) as record:
        registry.convert_depth_to_pressure(1000., 0., region='baltic_sea')
    assert record.pop(DomainWarning).filename == __file__
