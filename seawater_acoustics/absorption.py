from seawater_acoustics.tools.arrays import broadcast_inputs, stack_contributors, to_output
from seawater_acoustics.tools.units import (convert_temperature, depth_to_atm_approximate,
                                            khz_to_hz, m_to_km, NP_PER_M_TO_DB_PER_KM)
from seawater_acoustics.tools.validation import parse_selector, check_domain
from enum import Enum
import numpy as np

# Sound absorption coefficient of seawater [dB km-1].
#
# All formulas add three contributions:
# H3BO3: boric acid, chemical relaxation (dominant for f < 10 kHz)
# MgSO4: magnesium sulphate, chemical relaxation (10 < f < 200 kHz)
# H2O: pure water, viscous absorption (f > 200 kHz)
#
# Inputs: t [degC, ITS-90 unless t_scale says otherwise], s [ppt], pH [-],
# z [m], f [kHz].

CONTRIBUTORS = ('H3BO3', 'MgSO4', 'H2O')

class OutputMode(Enum):
    TOTAL = 'tot'
    PER_CONTRIBUTOR = 'par'

FISHER_SIMMONS_1977_DOMAIN = {'f': (0.1, 1000.)}
FRANCOIS_GARRISON_1982_DOMAIN = {'f': (0.2, 1000.), 'z': (0., 5000.)}
AINSLIE_MCCOLM_1998_DOMAIN = {'t': (-6., 35.), 's': (5., 50.), 'pH': (7.7, 8.3),
                              'z': (0., 7000.), 'f': (0.1, 1000.)}
KINSLER_2000_DOMAIN = {'z': (0., 6000.), 'f': (0.1, 1000.)}

def _combine(alpha1, alpha2, alpha3, output, scale=1.) -> np.ndarray:
    output = parse_selector(OutputMode, output, 'output')
    if output is OutputMode.TOTAL:
        return to_output((alpha1 + alpha2 + alpha3)*scale)
    return stack_contributors(alpha1*scale, alpha2*scale, alpha3*scale)

def absorption_fisher_simmons_1977(t, z, f, output='tot', t_scale='its90',
                                   domain_policy='ignore', log_file=None):
    '''Absorption coefficient [dB km-1] from Fisher & Simmons (1977).
    Only valid for s = 35 ppt and pH = 8, so neither is an input.

    Fisher, F.H., & Simmons, V.P. (1977). "Sound absorption in sea water",
    J. Acoust. Soc. Am. 62(3), 558-564.'''
    parse_selector(OutputMode, output, 'output')
    t, z, f = broadcast_inputs(t=t, z=z, f=f)
    check_domain('Fisher & Simmons (1977) absorption', FISHER_SIMMONS_1977_DOMAIN,
                 domain_policy, log_file, t=t, z=z, f=f)

    t = convert_temperature(t, t_scale, 'ipts68')
    p = depth_to_atm_approximate(z) # [atm]
    f = khz_to_hz(f)
    T = t + 273.1 # [K]

    # Np m-1 Hz-1 and Hz below
    A1 = (-5.22e-12*t + 2.36e-10)*t + 1.03e-8
    f1 = 1315*T*np.exp(-1700/T)
    alpha1 = A1*f1*f**2/(f1**2 + f**2) # P1 = 1

    P2 = (3.7e-7*p - 1.03e-3)*p + 1
    A2 = 7.52e-10*t + 5.62e-8
    f2 = 1.55e7*T*np.exp(-3052/T)
    alpha2 = A2*P2*f2*f**2/(f2**2 + f**2)

    P3 = (7.57e-8*p - 3.84e-4)*p + 1
    A3 = (((-3.48e-4*t + 4.77e-2)*t - 2.37)*t + 55.9)*1e-15
    alpha3 = A3*P3*f**2

    return _combine(alpha1, alpha2, alpha3, output, scale=NP_PER_M_TO_DB_PER_KM)

def absorption_francois_garrison_1982(t, s, pH, z, f, output='tot', t_scale='its90',
                                      domain_policy='ignore', log_file=None):
    '''Absorption coefficient [dB km-1] from Francois & Garrison (1982a, 1982b).

    Check values (t in IPTS-68, pH = 8, z = 0 m):
    t=0, s=30, f=1 kHz: 0.0610; t=0, s=35, f=10 kHz: 1.29; t=10, s=35, f=100 kHz: 33.6.

    Francois, R.E., & Garrison, G.R. (1982). "Sound absorption based on ocean
    measurements. Part I and II", J. Acoust. Soc. Am., 72(3), 896-907 and
    72(6), 1879-1890.'''
    parse_selector(OutputMode, output, 'output')
    t, s, pH, z, f = broadcast_inputs(t=t, s=s, pH=pH, z=z, f=f)
    check_domain('Francois & Garrison (1982) absorption', FRANCOIS_GARRISON_1982_DOMAIN,
                 domain_policy, log_file, t=t, s=s, pH=pH, z=z, f=f)

    t = convert_temperature(t, t_scale, 'ipts68')
    T = t + 273 # [K]
    c = 1412 + 3.21*t + 1.19*s + 1.67e-2*z # simple sound speed [m s-1]

    A1 = 8.86*10**(0.78*pH - 5)/c
    f1 = 2.8*np.sqrt(s/35)*10**(4 - 1245/T)
    alpha1 = A1*f1*f**2/(f**2 + f1**2) # P1 = 1

    P2 = (6.2e-9*z - 1.37e-4)*z + 1
    A2 = 21.44*s*(1 + 2.5e-2*t)/c
    f2 = (8.17*10**(8 - 1990/T))/(1 + 1.8e-3*(s - 35))
    alpha2 = A2*P2*f2*f**2/(f**2 + f2**2)

    P3 = (4.9e-10*z - 3.83e-5)*z + 1
    A3 = np.where(t > 20,
                  ((-6.5e-10*t + 1.45e-7)*t - 1.146e-5)*t + 3.964e-4,
                  ((-1.5e-8*t + 9.11e-7)*t - 2.59e-5)*t + 4.937e-4)
    alpha3 = A3*P3*f**2

    return _combine(alpha1, alpha2, alpha3, output)

def absorption_ainslie_mccolm_1998(t, s, pH, z, f, output='tot', t_scale='its90',
                                   domain_policy='ignore', log_file=None):
    '''Absorption coefficient [dB km-1] from Ainslie & McColm (1998), a
    simplified Francois & Garrison (1982) within 10% for 0.1 < f < 1000 kHz,
    -6 < t < 35 degC, 7.7 < pH < 8.3, 5 < s < 50 ppt and 0 < z < 7 km.

    Ainslie, M.A., & McColm, J.G. (1998). "A simplified formula for viscous
    and chemical absorption in sea water", J. Acoust. Soc. Am. 103(3), 1671-1672.'''
    parse_selector(OutputMode, output, 'output')
    t, s, pH, z, f = broadcast_inputs(t=t, s=s, pH=pH, z=z, f=f)
    check_domain('Ainslie & McColm (1998) absorption', AINSLIE_MCCOLM_1998_DOMAIN,
                 domain_policy, log_file, t=t, s=s, pH=pH, z=z, f=f)

    t = convert_temperature(t, t_scale, 'ipts68')
    z = m_to_km(z)

    f1 = 0.78*np.sqrt(s/35)*np.exp(t/26)
    alpha1 = 0.106*f1*f**2/(f**2 + f1**2)*np.exp((pH - 8)/0.56)

    f2 = 42*np.exp(t/17)
    alpha2 = 0.52*(1 + t/43)*s/35*f2*f**2/(f**2 + f2**2)*np.exp(-z/6)

    alpha3 = 4.9e-4*f**2*np.exp(-t/27 - z/17)

    return _combine(alpha1, alpha2, alpha3, output)

def absorption_kinsler_2000(t, s, pH, z, f, output='tot', t_scale='its90',
                            domain_policy='ignore', log_file=None):
    '''Absorption coefficient [dB km-1] from Kinsler et al. (2000), valid to
    10% for 0.1 < f < 1000 kHz and z < 6000 m. Temperature is used in ITS-90.

    Kinsler, L.E., Frey, A., Coppens, A.B., & Sanders, J.V. (2000).
    Fundamentals of Acoustics. 4th Ed., John Wiley & Sons: New York.'''
    parse_selector(OutputMode, output, 'output')
    t, s, pH, z, f = broadcast_inputs(t=t, s=s, pH=pH, z=z, f=f)
    check_domain('Kinsler et al. (2000) absorption', KINSLER_2000_DOMAIN,
                 domain_policy, log_file, t=t, s=s, pH=pH, z=z, f=f)

    t = convert_temperature(t, t_scale, 'its90')
    z = m_to_km(z)
    f = khz_to_hz(f)

    f1 = 780*np.exp(t/29) # [Hz]
    alpha1 = 0.083*(s/35)*np.exp(t/31 - z/91 + 1.8*(pH - 8))*f**2/(f**2 + f1**2)

    f2 = 42e3*np.exp(t/18) # [Hz]
    alpha2 = 22*(s/35)*np.exp(t/14 - z/6)*f**2/(f**2 + f2**2)

    alpha3 = 4.9e-10*f**2*np.exp(-t/26 - z/25)

    return _combine(alpha1, alpha2, alpha3, output)
