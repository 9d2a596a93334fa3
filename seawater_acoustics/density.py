from seawater_acoustics.tools.arrays import broadcast_inputs, to_output
from seawater_acoustics.tools.units import convert_temperature, dbar_to_bar
from seawater_acoustics.tools.validation import check_domain
import numpy as np

# Density of seawater from the UNESCO International Equation of State
# (EOS-80), as given in Fofonoff & Millard (1983) "Algorithms for
# computation of fundamental properties of seawater", Unesco Technical
# Papers in Marine Science, No. 44.
#
# The relevant equation numbers from this document are referenced
# in the functions when applicable.
#
# Symbols/abbreviations used:
# T68: temperature [degC, IPTS-68]
# S: salinity [ppt]
# P: gauge pressure [bar] (the functions below), [dbar] (the public function)
# rho: density [kg m-3]
# K: secant bulk modulus [bar]

FOFONOFF_MILLARD_1983_DOMAIN = {'t': (-2., 40.), 's': (0., 42.), 'p': (0., 10000.)}

def calculate_density_of_standard_mean_ocean_water(T68:np.ndarray) -> np.ndarray:
    '''Density of reference pure water (SMOW).
    Equation 14, page 17 of Unesco 1983.'''
    a = (999.842594, 6.793952e-2, -9.095290e-3, 1.001685e-4, -1.120083e-6, 6.536332e-9)
    return np.polynomial.polynomial.polyval(T68, a)

def calculate_density_at_atmospheric_pressure(S:np.ndarray, T68:np.ndarray) -> np.ndarray:
    '''Density of seawater at atmospheric pressure (P=0).
    Equation 13, page 17 of Unesco 1983.'''
    b = np.polynomial.polynomial.polyval(T68, (8.24493e-1, -4.0899e-3, 7.6438e-5, -8.2467e-7, 5.3875e-9))
    c = np.polynomial.polynomial.polyval(T68, (-5.72466e-3, 1.0227e-4, -1.6546e-6))
    d = 4.8314e-4
    rho_smow = calculate_density_of_standard_mean_ocean_water(T68)
    return rho_smow + (b + c*np.sqrt(S) + d*S)*S

def calculate_secant_bulk_modulus(S:np.ndarray, T68:np.ndarray, P:np.ndarray) -> np.ndarray:
    '''Secant bulk modulus of seawater, P in bar.
    Equations 15 to 19, pages 18-19 of Unesco 1983.'''
    polyval = np.polynomial.polynomial.polyval

    K_w = polyval(T68, (19652.21, 148.4206, -2.327105, 1.360477e-2, -5.155288e-5)) # pure water: equation 19
    f = polyval(T68, (54.6746, -0.603459, 1.09987e-2, -6.1670e-5))
    g = polyval(T68, (7.944e-2, 1.6483e-2, -5.3009e-4))
    K_P0 = K_w + (f + g*np.sqrt(S))*S # at atmospheric pressure: equation 16

    A_w = polyval(T68, (3.239908, 1.43713e-3, 1.16092e-4, -5.77905e-7))
    i = polyval(T68, (2.2838e-3, -1.0981e-5, -1.6078e-6))
    j = 1.91075e-4
    A = A_w + (i + j*np.sqrt(S))*S # equation 17

    B_w = polyval(T68, (8.50935e-5, -6.12293e-6, 5.2787e-8))
    m = polyval(T68, (-9.9348e-7, 2.0816e-8, 9.1697e-10))
    B = B_w + m*S # equation 18

    return K_P0 + (A + B*P)*P # equation 15

def density_fofonoff_millard_1983(t, s, p, t_scale='its90', domain_policy='ignore', log_file=None):
    '''Density of seawater [kg m-3] at gauge pressure p [dbar].
    Equation 7, page 15 of Unesco 1983.

    Check values (t in IPTS-68):
    t=5, s=0, p=0: 999.96675 kg m-3
    t=5, s=35, p=0: 1027.67547 kg m-3
    t=25, s=35, p=10000: 1062.53817 kg m-3'''
    t, s, p = broadcast_inputs(t=t, s=s, p=p)
    check_domain('Fofonoff & Millard (1983) density', FOFONOFF_MILLARD_1983_DOMAIN,
                 domain_policy, log_file, t=t, s=s, p=p)
    T68 = convert_temperature(t, t_scale, 'ipts68')
    P = dbar_to_bar(p)

    rho_P0 = calculate_density_at_atmospheric_pressure(s, T68)
    K = calculate_secant_bulk_modulus(s, T68, P)
    return to_output(rho_P0/(1 - P/K))
