from seawater_acoustics.errors import TemperatureDomainError
from seawater_acoustics.tools.validation import parse_selector
from enum import Enum
import numpy as np

# Conversions shared by all formula groups. Every formula converts its
# inputs (ITS-90 temperature, dbar, m, kHz) to the units it was fitted in
# using the functions below.

ITS90_TO_IPTS68 = 1.00024
DBAR_PER_BAR = 10.
DBAR_PER_KGCM2 = 9.80665 # 1 kg cm-2 (technical atmosphere)
DBAR_PER_ATM = 10.132501
DBAR_PER_MPA = 100.
NP_PER_M_TO_DB_PER_KM = 8686.

class TemperatureScale(Enum):
    ITS90 = 'its90'
    IPTS68 = 'ipts68'
    IPTS48 = 'ipts48'

# --- temperature ---
def its90_to_ipts68(t):
    return ITS90_TO_IPTS68*np.asarray(t, dtype=float)

def ipts68_to_its90(t68):
    return np.asarray(t68, dtype=float)/ITS90_TO_IPTS68

def ipts68_to_ipts48(t68):
    '''Principal root of t68 = 0.99956*t48 + 4.4e-6*t48**2.'''
    t68 = np.asarray(t68, dtype=float)
    discriminant = 0.9991202 + 1.76e-5*t68
    if np.any(discriminant < 0):
        raise TemperatureDomainError('IPTS-68 temperature below -56768 degC has no IPTS-48 equivalent.')
    return (-0.99956 + np.sqrt(discriminant))/8.8e-6

def ipts48_to_ipts68(t48):
    '''Exact inverse of ipts68_to_ipts48. Equal to 0.99956*t48 + 4.4e-6*t48**2
    apart from a constant -3.6e-4 degC from the rounded 0.9991202.'''
    t48 = np.asarray(t48, dtype=float)
    return ((8.8e-6*t48 + 0.99956)**2 - 0.9991202)/1.76e-5

def convert_temperature(t, from_scale, to_scale) -> np.ndarray:
    '''Converts temperature [degC] between the ITS-90, IPTS-68 and IPTS-48 scales.
    Scales can be given as TemperatureScale or as 'its90', 'ipts68', 'ipts48'.'''
    from_scale = parse_selector(TemperatureScale, from_scale, 't_scale')
    to_scale = parse_selector(TemperatureScale, to_scale, 't_scale')
    t = np.asarray(t, dtype=float)
    if from_scale is to_scale:
        return t
    # everything passes through IPTS-68
    if from_scale is TemperatureScale.ITS90:
        t68 = its90_to_ipts68(t)
    elif from_scale is TemperatureScale.IPTS48:
        t68 = ipts48_to_ipts68(t)
    else:
        t68 = t
    if to_scale is TemperatureScale.ITS90:
        return ipts68_to_its90(t68)
    if to_scale is TemperatureScale.IPTS48:
        return ipts68_to_ipts48(t68)
    return t68

# --- pressure ---
def dbar_to_bar(p):
    return np.asarray(p, dtype=float)/DBAR_PER_BAR

def bar_to_dbar(p):
    return np.asarray(p, dtype=float)*DBAR_PER_BAR

def dbar_to_kgcm2(p):
    return np.asarray(p, dtype=float)/DBAR_PER_KGCM2

def kgcm2_to_dbar(p):
    return np.asarray(p, dtype=float)*DBAR_PER_KGCM2

def dbar_to_atm(p):
    return np.asarray(p, dtype=float)/DBAR_PER_ATM

def atm_to_dbar(p):
    return np.asarray(p, dtype=float)*DBAR_PER_ATM

def dbar_to_mpa(p):
    return np.asarray(p, dtype=float)/DBAR_PER_MPA

def mpa_to_dbar(p):
    return np.asarray(p, dtype=float)*DBAR_PER_MPA

def depth_to_atm_approximate(z):
    '''Gauge pressure [atm] from depth [m] as p = z/10. Only used as a
    shortcut inside absorption formulas, see depth_pressure for accurate
    conversions.'''
    return np.asarray(z, dtype=float)/10.

# --- other ---
def m_to_km(z):
    return np.asarray(z, dtype=float)*1e-3

def khz_to_hz(f):
    return np.asarray(f, dtype=float)*1e3

def np_per_m_to_db_per_km(alpha):
    return np.asarray(alpha, dtype=float)*NP_PER_M_TO_DB_PER_KM

def gravity(lat) -> np.ndarray:
    '''Acceleration of gravity [m s-2] at the sea surface for latitude [deg].'''
    sin2 = np.sin(np.deg2rad(np.asarray(lat, dtype=float)))**2
    return 9.780318*(1 + (-2.36e-5*sin2 + 5.2788e-3)*sin2)
