from seawater_acoustics.errors import InvalidSelector, TemperatureDomainError
from seawater_acoustics.tools import units
from seawater_acoustics.tools.units import TemperatureScale, convert_temperature
import numpy as np
import pytest

def test_its90_to_ipts68():
    assert np.isclose(units.its90_to_ipts68(10.), 10.0024)
    assert np.isclose(units.ipts68_to_its90(10.0024), 10.)

def test_ipts48_inversion_is_principal_root():
    t48 = np.array([-2., 0., 10., 25., 40.])
    t68 = units.ipts48_to_ipts68(t48)
    assert np.allclose(units.ipts68_to_ipts48(t68), t48, atol=1e-9)

def test_ipts48_zero_maps_back_to_zero():
    assert np.isclose(units.ipts68_to_ipts48(units.ipts48_to_ipts68(0.)), 0., atol=1e-9)
    assert np.isclose(units.ipts48_to_ipts68(10.), 0.99956*10. + 4.4e-6*100. - 3.636e-4, atol=1e-6)

def test_ipts48_close_to_ipts68_in_ocean_range():
    t68 = np.linspace(0, 30, 7)
    assert np.all(np.abs(units.ipts68_to_ipts48(t68) - t68) < 0.02)

def test_ipts48_negative_discriminant_raises():
    with pytest.raises(TemperatureDomainError):
        units.ipts68_to_ipts48(-60000.)

@pytest.mark.parametrize('from_scale, to_scale', [('its90', 'ipts48'), ('ipts48', 'its90'),
                                                  ('ipts68', 'its90'), ('its90', 'ipts68')])
def test_convert_temperature_round_trip(from_scale, to_scale):
    t = np.array([0., 12.5, 30.])
    there = convert_temperature(t, from_scale, to_scale)
    back = convert_temperature(there, to_scale, from_scale)
    assert np.allclose(back, t, atol=1e-9)

def test_convert_temperature_same_scale_is_identity():
    t = np.array([1., 2.])
    assert np.array_equal(convert_temperature(t, TemperatureScale.ITS90, 'ITS90'), t)

def test_convert_temperature_invalid_scale():
    with pytest.raises(InvalidSelector):
        convert_temperature(10., 'kelvin', 'its90')

def test_pressure_units():
    assert np.isclose(units.dbar_to_bar(100.), 10.)
    assert np.isclose(units.bar_to_dbar(10.), 100.)
    assert np.isclose(units.dbar_to_kgcm2(9.80665), 1.)
    assert np.isclose(units.kgcm2_to_dbar(1.), 9.80665)
    assert np.isclose(units.dbar_to_atm(10.132501), 1.)
    assert np.isclose(units.atm_to_dbar(1.), 10.132501)
    assert np.isclose(units.dbar_to_mpa(100.), 1.)
    assert np.isclose(units.mpa_to_dbar(1.), 100.)
    assert np.isclose(units.depth_to_atm_approximate(1000.), 100.)

def test_other_units():
    assert np.isclose(units.m_to_km(1500.), 1.5)
    assert np.isclose(units.khz_to_hz(2.), 2000.)
    assert np.isclose(units.np_per_m_to_db_per_km(1e-3), 8.686)

def test_gravity():
    assert np.isclose(units.gravity(0.), 9.780318)
    assert np.isclose(units.gravity(90.), 9.780318*(1 + 5.2788e-3 - 2.36e-5))
    assert units.gravity(45.) < units.gravity(60.)
