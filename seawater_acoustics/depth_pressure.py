from seawater_acoustics.regions import Region, Leroy1968Region, check_region_latitude
from seawater_acoustics.tools.arrays import broadcast_inputs, to_output
from seawater_acoustics.tools.units import (DBAR_PER_MPA, gravity,
                                            dbar_to_kgcm2, dbar_to_mpa, kgcm2_to_dbar)
from seawater_acoustics.tools.validation import parse_selector
import numpy as np

# Conversions between depth below the sea surface z [m] and
# hydrostatic (gauge) pressure p [dbar]. lat in [deg].
# If latitude and region are unknown, lat = 45 and the common
# oceans region give an approximate result.

def _sin2(lat) -> np.ndarray:
    return np.sin(np.deg2rad(lat))**2

# Leroy & Parthiot (1998) regional corrections.
# Dp [MPa] as a function of z [m], Dz [m] as a function of p [MPa].
PRESSURE_CORRECTIONS = {
    Region.COMMON_OCEANS: lambda z: (1e-2/(z + 100) + 6.2e-6)*z,
    Region.NORTH_EAST_ATLANTIC: lambda z: (8e-3/(z + 200) + 4e-6)*z,
    Region.CIRCUMPOLAR_ANTARCTIC: lambda z: (8e-3/(z + 1000) + 1.6e-6)*z,
    Region.MEDITERRANEAN_SEA: lambda z: (1.4e-9*z - 8.5e-6)*z,
    Region.RED_SEA: lambda z: np.zeros_like(z),
    Region.ARCTIC_OCEAN: lambda z: np.zeros_like(z),
    Region.SEA_OF_JAPAN: lambda z: 7.8e-6*z,
    Region.SULU_SEA: lambda z: (1e-9*z + 1.6e-5 + 1e-2/(z + 100))*z,
    Region.HALMAHERA_BASIN: lambda z: (8e-3/(z + 50) + 1.3e-5)*z,
    Region.CELEBES_BASIN: lambda z: (2.5e-10*z + 7e-6 + 1.2e-2/(z + 100))*z,
    Region.WEBER_DEEP: lambda z: (2.5e-10*z + 7e-6 + 1.2e-2/(z + 100))*z,
    Region.BLACK_SEA: lambda z: 1.13e-4*z,
    Region.BALTIC_SEA: lambda z: 1.8e-4*z,
}

DEPTH_CORRECTIONS = {
    Region.COMMON_OCEANS: lambda p: (1/(p + 1) + 5.7e-2)*p,
    Region.NORTH_EAST_ATLANTIC: lambda p: (1/(p + 2) + 3e-2)*p,
    Region.CIRCUMPOLAR_ANTARCTIC: lambda p: (-2e-4*p + 4e-2)*p,
    Region.MEDITERRANEAN_SEA: lambda p: (2e-3*p - 7e-2)*p,
    Region.RED_SEA: lambda p: np.zeros_like(p),
    Region.ARCTIC_OCEAN: lambda p: np.zeros_like(p),
    Region.SEA_OF_JAPAN: lambda p: 6e-2*p,
    Region.SULU_SEA: lambda p: (7e-4*p + 0.17 + 0.9/(p + 1))*p,
    Region.HALMAHERA_BASIN: lambda p: (0.8/(p + 5) + 1.25e-1)*p,
    Region.CELEBES_BASIN: lambda p: (2.2e-4*p + 6.7e-2 + 1.2/(p + 1))*p,
    Region.WEBER_DEEP: lambda p: (2.2e-4*p + 6.7e-2 + 1.2/(p + 1))*p,
    Region.BLACK_SEA: lambda p: 1.1*p,
    Region.BALTIC_SEA: lambda p: 1.8*p,
}

# --- depth to pressure ---
def depth_to_pressure_leroy_1968(z, lat, region=0) -> np.ndarray:
    '''Leroy (1968). Latitude is only used for the common oceans (region 0),
    the Black Sea (1) and Baltic Sea (2) have their own fits.'''
    region = parse_selector(Leroy1968Region, region, 'region')
    z, lat = broadcast_inputs(z=z, lat=lat)
    if region is Leroy1968Region.COMMON_OCEANS:
        p = (2.524e-7*z + 0.102506*(1 + 5.28e-3*_sin2(lat)))*z + 1e-2
    elif region is Leroy1968Region.BLACK_SEA:
        p = (2.6e-7*z + 1.0168e-1)*z
    else:
        p = (1.4e-6*z + 1.008e-1)*z
    return to_output(kgcm2_to_dbar(p))

def depth_to_pressure_leroy_1988(z, lat) -> np.ndarray:
    z, lat = broadcast_inputs(z=z, lat=lat)
    p = 1.00534*(2.46e-6*z + 1 + 5.294e-3*_sin2(lat))*z
    return to_output(p)

def depth_to_pressure_lovett_1978(z, lat) -> np.ndarray:
    z, lat = broadcast_inputs(z=z, lat=lat)
    p = (2.36e-6*z + 1.0052405*(1 + 5.28e-3*_sin2(lat)))*z
    return to_output(p)

def depth_to_pressure_leroy_parthiot_1998(z, lat, region=0, log_file=None) -> np.ndarray:
    '''Leroy & Parthiot (1998): pressure for the standard ocean at 45 deg,
    corrected for gravity at lat and for the regional water column.
    A latitude outside the band of the region only gives a warning.'''
    region = parse_selector(Region, region, 'region')
    z, lat = broadcast_inputs(z=z, lat=lat)
    check_region_latitude(region, lat, log_file=log_file)

    g = gravity(lat)
    k = (g - 2e-5*z)/(9.80612 - 2e-5*z)
    ps45 = (((2.8e-19*z - 1.25e-13)*z + 2.465e-8)*z + 1.00818e-2)*z # [MPa]
    Dp = PRESSURE_CORRECTIONS[region](z)
    return to_output((ps45*k - Dp)*DBAR_PER_MPA)

# --- pressure to depth ---
def pressure_to_depth_ross_1978(p) -> np.ndarray:
    '''Ross (1978), assumes a latitude of 45 deg. Very limited accuracy.'''
    (p,) = broadcast_inputs(p=p)
    p = dbar_to_kgcm2(p)
    return to_output((-2.2e-4*p + 9.74)*p)

def pressure_to_depth_bisset_berman_1971(p, lat) -> np.ndarray:
    '''Bisset-Berman (1971), 1-5 m below Leroy & Parthiot (1998).'''
    p, lat = broadcast_inputs(p=p, lat=lat)
    p = dbar_to_kgcm2(p)
    return to_output((-2.07e-4*p + 9.7512/(1 + 5.3e-3*_sin2(lat)))*p)

def pressure_to_depth_leroy_parthiot_1998(p, lat, region=0, log_file=None) -> np.ndarray:
    '''Inverse of depth_to_pressure_leroy_parthiot_1998, to within the
    standard deviation of the region.'''
    region = parse_selector(Region, region, 'region')
    p, lat = broadcast_inputs(p=p, lat=lat)
    check_region_latitude(region, lat, log_file=log_file)

    p = dbar_to_mpa(p)
    g = gravity(lat)
    zs = ((((-1.82e-7*p) + 2.279e-4)*p - 2.2512e-1)*p + 9.72659e2)*p/(g + 1.092e-4*p)
    Dz = DEPTH_CORRECTIONS[region](p)
    return to_output(zs + Dz)
