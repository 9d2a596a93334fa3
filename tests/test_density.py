from seawater_acoustics import density
from seawater_acoustics.errors import DomainError, ShapeMismatch
import numpy as np
import pytest

@pytest.mark.parametrize('t, s, p, expected', [(5., 0., 0., 999.96675),
                                                (5., 35., 0., 1027.67547),
                                                (25., 35., 10000., 1062.53817)])
def test_check_values(t, s, p, expected):
    rho = density.density_fofonoff_millard_1983(t, s, p, t_scale='ipts68')
    assert np.isclose(rho, expected, atol=1e-5)

def test_standard_mean_ocean_water_maximum_density():
    T68 = np.linspace(0, 8, 81)
    rho = density.calculate_density_of_standard_mean_ocean_water(T68)
    assert 3.8 < T68[np.argmax(rho)] < 4.2

def test_surface_density_equals_atmospheric_density():
    rho_p0 = density.calculate_density_at_atmospheric_pressure(35., 10.)
    rho = density.density_fofonoff_millard_1983(10., 35., 0., t_scale='ipts68')
    assert np.isclose(rho, rho_p0, rtol=1e-14)

def test_secant_bulk_modulus_increases_with_pressure():
    K = density.calculate_secant_bulk_modulus(35., 10., np.array([0., 100., 1000.]))
    assert np.all(np.diff(K) > 0)

def test_density_increases_with_pressure_and_salinity():
    rho_p = density.density_fofonoff_millard_1983(10., 35., np.array([0., 1000., 5000.]))
    rho_s = density.density_fofonoff_millard_1983(10., np.array([0., 20., 40.]), 0.)
    assert np.all(np.diff(rho_p) > 0)
    assert np.all(np.diff(rho_s) > 0)

def test_broadcast_shape_and_scalar_output():
    rho = density.density_fofonoff_millard_1983(np.array([[0.], [10.]]), np.array([30., 35., 40.]), 0.)
    assert rho.shape == (2, 3)
    assert np.ndim(density.density_fofonoff_millard_1983(10., 35., 0.)) == 0

def test_shape_mismatch():
    with pytest.raises(ShapeMismatch):
        density.density_fofonoff_millard_1983(np.zeros(2), np.zeros(3), 0.)

def test_domain_check_is_opt_in():
    rho = density.density_fofonoff_millard_1983(10., 45., 0.)
    assert np.isfinite(rho)
    with pytest.raises(DomainError):
        density.density_fofonoff_millard_1983(10., 45., 0., domain_policy='raise')
