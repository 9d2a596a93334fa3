from seawater_acoustics.tools.arrays import broadcast_inputs, to_output
from seawater_acoustics.tools.units import (TemperatureScale, convert_temperature, m_to_km,
                                            DBAR_PER_ATM, DBAR_PER_BAR, DBAR_PER_KGCM2)
from seawater_acoustics.tools.validation import parse_selector, check_domain
from dataclasses import dataclass
from enum import Enum
import numpy as np

# Speed of sound in seawater [m s-1].
#
# Inputs: t [degC, ITS-90 unless t_scale says otherwise], s [ppt],
# p [dbar, gauge unless stated otherwise], z [m], lat [deg].
# Each formula converts temperature to the scale it was fitted in
# (ITS-90, IPTS-68 or IPTS-48) and pressure to its own unit.

# --- sub-equation selectors ---
class WilsonEquation(Enum):
    FIRST = 1 # Wilson (1960b)
    SECOND = 2 # Wilson (1960c)

class DelGrossoEquation(Enum):
    ORIGINAL = 'gro' # Del Grosso (1974), IPTS-68
    WONG_ZHU = 'won' # Wong & Zhu (1995) coefficients, ITS-90

class ChenMilleroEquation(Enum):
    UNESCO = 'une' # Chen & Millero (1977) as in UNESCO (1983), IPTS-68
    WONG_ZHU = 'won' # Wong & Zhu (1995) coefficients, ITS-90

class LovettEquation(Enum):
    FIRST = 1
    SECOND = 2
    THIRD = 3

class CoppensEquation(Enum):
    BASIC = 'bas'
    COMPLETE = 'com'

class LeroyEquation(Enum):
    FIRST = 1 # approximation to Wilson (1960c)
    SECOND = 2 # fit to Wilson (1960a) measurements

class Accuracy(Enum):
    SIMPLIFIED = 'sim' # c0 only
    BASIC = 'bas' # c0 + ca + cb
    COMPLETE = 'com' # c0 + ca + cb + cc + cd

@dataclass(frozen=True)
class SoundSpeedPolynomial:
    '''Coefficient table of a formula of the form
    c = c0 + sum(coefficient * t**i * S**j * p**k)
    with S = s - s_ref and p in the unit of the fit.'''
    t_scale: TemperatureScale
    dbar_per_unit: float
    s_ref: float
    c0: float
    terms: tuple # ((i, j, k), coefficient)

    def evaluate(self, t:np.ndarray, s:np.ndarray, p_dbar:np.ndarray) -> np.ndarray:
        S = s - self.s_ref
        p = p_dbar/self.dbar_per_unit
        c = self.c0 + np.zeros(np.broadcast(t, S, p).shape)
        for (i, j, k), coefficient in self.terms:
            c = c + coefficient*t**i*S**j*p**k
        return c

# --- coefficient tables ---
WILSON_1960 = {
    WilsonEquation.FIRST: SoundSpeedPolynomial(TemperatureScale.IPTS48, DBAR_PER_KGCM2, 35., 1449.22, (
        ((1, 0, 0), 4.62330e+00), ((2, 0, 0), -5.45850e-02), ((3, 0, 0), 2.82200e-04), ((4, 0, 0), -5.07000e-07),
        ((0, 0, 1), 1.60518e-01), ((0, 0, 2), 1.02790e-05), ((0, 0, 3), 3.45100e-09), ((0, 0, 4), -3.50300e-12),
        ((0, 1, 0), 1.39100e+00), ((0, 2, 0), -7.80000e-02),
        ((1, 0, 1), -2.79600e-04), ((2, 0, 1), 1.33020e-05), ((3, 0, 1), -6.64400e-08),
        ((1, 0, 2), -2.39100e-07), ((2, 0, 2), 9.28600e-10), ((1, 0, 3), -1.74500e-10),
        ((1, 1, 0), -1.19700e-02), ((0, 1, 1), 2.61000e-04), ((0, 1, 2), -1.96000e-07), ((1, 1, 1), -2.09000e-06),
    )),
    WilsonEquation.SECOND: SoundSpeedPolynomial(TemperatureScale.IPTS48, DBAR_PER_KGCM2, 35., 1449.14, (
        ((1, 0, 0), 4.57210e+00), ((2, 0, 0), -4.45320e-02), ((3, 0, 0), -2.60450e-04), ((4, 0, 0), 7.98510e-06),
        ((0, 0, 1), 1.60272e-01), ((0, 0, 2), 1.02680e-05), ((0, 0, 3), 3.52160e-09), ((0, 0, 4), -3.36030e-12),
        ((0, 1, 0), 1.39799e+00), ((0, 2, 0), 1.69202e-03),
        ((1, 0, 1), -1.86070e-04), ((2, 0, 1), 7.48120e-06), ((3, 0, 1), 4.52830e-08),
        ((1, 0, 2), -2.52940e-07), ((2, 0, 2), 1.85630e-09), ((1, 0, 3), -1.96460e-10),
        ((1, 1, 0), -1.12440e-02), ((2, 1, 0), 7.77110e-07), ((0, 1, 1), 7.70160e-05),
        ((0, 1, 2), -1.29430e-07), ((1, 1, 1), 3.15800e-08), ((2, 1, 1), 1.57900e-09),
    )),
}

FRYE_PUGH_1971 = SoundSpeedPolynomial(TemperatureScale.IPTS48, DBAR_PER_KGCM2, 35., 1449.3, (
    ((0, 0, 1), 1.5848e-01), ((0, 0, 2), 1.5720e-05), ((0, 0, 4), -3.4600e-12),
    ((1, 0, 0), 4.5870e+00), ((2, 0, 0), -5.3560e-02), ((3, 0, 0), 2.6040e-04),
    ((0, 1, 0), 1.1900e+00), ((0, 3, 0), 9.6000e-02),
    ((2, 0, 1), 1.3540e-05), ((1, 0, 2), -7.1900e-07), ((1, 1, 0), -1.2000e-02),
))

def _del_grosso_table(t_scale, ct1, ct2, ct3, cs1, cs2, cp1, cp2, cp3, cts, ctp, ct2p2,
                      ctp2, ctp3, ct3p, cs2p2, ct2s, cts2p, ctsp,
                      c0=1402.392, dbar_per_unit=DBAR_PER_KGCM2):
    return SoundSpeedPolynomial(t_scale, dbar_per_unit, 0., c0, (
        ((1, 0, 0), ct1), ((2, 0, 0), ct2), ((3, 0, 0), ct3),
        ((0, 1, 0), cs1), ((0, 2, 0), cs2),
        ((0, 0, 1), cp1), ((0, 0, 2), cp2), ((0, 0, 3), cp3),
        ((1, 1, 0), cts), ((1, 0, 1), ctp), ((2, 0, 2), ct2p2), ((1, 0, 2), ctp2),
        ((1, 0, 3), ctp3), ((3, 0, 1), ct3p), ((0, 2, 2), cs2p2), ((2, 1, 0), ct2s),
        ((1, 2, 1), cts2p), ((1, 1, 1), ctsp),
    ))

DEL_GROSSO_1974 = {
    DelGrossoEquation.WONG_ZHU: _del_grosso_table(
        TemperatureScale.ITS90,
        ct1=5.012285e+00, ct2=-5.511840e-02, ct3=2.216490e-04,
        cs1=1.329530e+00, cs2=1.288598e-04,
        cp1=1.560592e-01, cp2=2.449993e-05, cp3=-8.833959e-09,
        cts=-1.275936e-02, ctp=6.353509e-03, ct2p2=2.656174e-08, ctp2=-1.593895e-06,
        ctp3=5.222483e-10, ct3p=-4.383615e-07, cs2p2=-1.616745e-09, ct2s=9.688441e-05,
        cts2p=4.857614e-06, ctsp=-3.406824e-04),
    DelGrossoEquation.ORIGINAL: _del_grosso_table(
        TemperatureScale.IPTS68,
        ct1=5.01109398873e+00, ct2=-5.50946843172e-02, ct3=2.21535969240e-04,
        cs1=1.32952290781e+00, cs2=1.28955756844e-04,
        cp1=1.56059257041e-01, cp2=2.44998688441e-05, cp3=-8.83392332513e-09,
        cts=-1.27562783426e-02, ctp=6.35191613389e-03, ct2p2=2.65484716608e-08, ctp2=-1.59349479045e-06,
        ctp3=5.22116437235e-10, ct3p=-4.38031096213e-07, cs2p2=-1.61674495909e-09, ct2s=9.68403156410e-05,
        cts2p=4.85639620015e-06, ctsp=-3.40597039004e-04),
}

LOVETT_1978 = {
    # 1st equation has the terms of Del Grosso (1974), p in dbar.
    # ct2p2 is printed as 2.760566e-02 in Lovett (1978), e-10 reproduces the check value
    LovettEquation.FIRST: _del_grosso_table(
        TemperatureScale.IPTS48,
        ct1=5.011094e+00, ct2=-5.509468e-02, ct3=2.215360e-04,
        cs1=1.329523e+00, cs2=1.289558e-04,
        cp1=1.598938e-02, cp2=2.478901e-07, cp3=-8.485727e-12,
        cts=-1.275628e-02, ctp=6.477152e-04, ct2p2=2.760566e-10, ctp2=-1.656950e-08,
        ctp3=5.536118e-13, ct3p=-4.466674e-08, cs2p2=-1.681126e-11, ct2s=9.684032e-05,
        cts2p=4.952146e-07, ctsp=-3.473123e-05,
        dbar_per_unit=1.),
    LovettEquation.SECOND: SoundSpeedPolynomial(TemperatureScale.IPTS48, 1., 0., 1402.394, (
        ((1, 0, 0), 5.028849e+00), ((2, 0, 0), -5.723758e-02), ((3, 0, 0), 2.858485e-04), ((5, 0, 0), -1.404216e-08),
        ((0, 1, 0), 1.280746e+00), ((0, 2, 0), 2.830167e-03), ((0, 3, 0), -3.787896e-05),
        ((0, 0, 1), 1.594777e-02), ((0, 0, 2), 2.778778e-07), ((0, 0, 5), 7.069489e-21),
        ((1, 1, 0), -1.280698e-02), ((2, 1, 0), 1.040167e-04), ((3, 3, 0), -9.301259e-11),
        ((1, 0, 1), 9.466535e-05), ((1, 0, 2), -1.23743e-08), ((2, 0, 1), -7.100174e-06),
        ((2, 0, 3), 8.592724e-14), ((3, 0, 1), -9.02519e-08), ((3, 0, 2), -2.70148e-11),
        ((0, 1, 3), -7.816551e-13), ((0, 2, 3), 1.303142e-14), ((0, 3, 2), -6.265617e-13),
        ((1, 1, 1), -2.238383e-06), ((2, 1, 1), 2.85346e-07),
    )),
    LovettEquation.THIRD: SoundSpeedPolynomial(TemperatureScale.IPTS48, 1., 0., 1402.394, (
        ((1, 0, 0), 5.01132e+00), ((2, 0, 0), -5.513036e-02), ((3, 0, 0), 2.221008e-04),
        ((0, 1, 0), 1.332947e+00),
        ((0, 0, 1), 1.605336e-02), ((0, 0, 2), 2.12448e-07),
        ((1, 1, 0), -1.266383e-02), ((2, 1, 0), 9.543664e-05), ((1, 0, 2), -1.052396e-08),
        ((1, 0, 3), 2.183988e-13), ((0, 1, 3), -2.253828e-13), ((1, 2, 1), 2.062107e-08),
    )),
}

ROSS_1978 = SoundSpeedPolynomial(TemperatureScale.IPTS68, DBAR_PER_KGCM2, 35., 1449.1, (
    ((1, 0, 0), 4.565), ((2, 0, 0), -5.17e-2), ((3, 0, 0), 2.21e-4),
    ((0, 0, 1), 1.592e-1), ((0, 0, 2), 1.25e-5),
    ((0, 1, 0), 1.338), ((1, 1, 0), -1.3e-2), ((2, 1, 0), 1e-4),
    ((0, 1, 1), 2e-4), ((0, 1, 2), -2.4e-7), ((1, 0, 1), 2e-4), ((1, 0, 2), -7.5e-7),
))

def _chen_millero_table(t_scale, C, A, B, D):
    '''C, A: coefficients of t**i for increasing powers of p (s**0 and s**1 terms),
    B: s**1.5 terms, D: s**2 terms.'''
    terms = []
    for k, row in enumerate(C):
        terms += [((i, 0, k), coefficient) for i, coefficient in enumerate(row) if not (i == 0 and k == 0)]
    for exponent_s, table in ((1, A), (1.5, B), (2, D)):
        for k, row in enumerate(table):
            terms += [((i, exponent_s, k), coefficient) for i, coefficient in enumerate(row)]
    return SoundSpeedPolynomial(t_scale, DBAR_PER_BAR, 0., C[0][0], tuple(terms))

CHEN_MILLERO_1977 = {
    ChenMilleroEquation.WONG_ZHU: _chen_millero_table(
        TemperatureScale.ITS90,
        C=((1402.388, 5.03830e+00, -5.81090e-02, 3.34320e-04, -1.47797e-06, 3.14190e-09),
           (1.53563e-01, 6.89990e-04, -8.18290e-06, 1.36320e-07, -6.12600e-10),
           (3.12600e-05, -1.71110e-06, 2.59860e-08, -2.53530e-10, 1.04150e-12),
           (-9.77290e-09, 3.85130e-10, -2.36540e-12)),
        A=((1.38900e+00, -1.26200e-02, 7.16600e-05, 2.00800e-06, -3.21000e-08),
           (9.47420e-05, -1.25830e-05, -6.49280e-08, 1.05150e-08, -2.01420e-10),
           (-3.90640e-07, 9.10610e-09, -1.60090e-10, 7.99400e-12),
           (1.10000e-10, 6.65100e-12, -3.39100e-13)),
        B=((-1.92200e-02, -4.42000e-05),
           (7.36370e-05, 1.79500e-07)),
        D=((1.72700e-03,),
           (-7.98360e-06,))),
    ChenMilleroEquation.UNESCO: _chen_millero_table(
        TemperatureScale.IPTS68,
        C=((1402.388, 5.03711e+00, -5.80852e-02, 3.34200e-04, -1.47800e-06, 3.14640e-09),
           (1.53563e-01, 6.89820e-04, -8.17880e-06, 1.36210e-07, -6.11850e-10),
           (3.12600e-05, -1.71070e-06, 2.59740e-08, -2.53350e-10, 1.04050e-12),
           (-9.77290e-09, 3.85040e-10, -2.36430e-12)),
        A=((1.38900e+00, -1.26200e-02, 7.16400e-05, 2.00600e-06, -3.21000e-08),
           (9.47420e-05, -1.25800e-05, -6.48850e-08, 1.05070e-08, -2.01220e-10),
           (-3.90640e-07, 9.10410e-09, -1.60020e-10, 7.98800e-12),
           (1.10000e-10, 6.64900e-12, -3.38900e-13)),
        B=((-1.92200e-02, -4.42000e-05),
           (7.36370e-05, 1.79450e-07)),
        D=((1.72700e-03,),
           (-7.98360e-06,))),
}

# --- valid domains (in caller units) ---
WILSON_1960_DOMAIN = {
    WilsonEquation.FIRST: {'t': (-4., 30.), 's': (33., 37.), 'p': (10.13, 9806.65)},
    WilsonEquation.SECOND: {'t': (-4., 30.), 's': (0., 37.), 'p': (10.13, 9806.65)},
}
KINSLER_1962_DOMAIN = {'t': (-4., 30.), 's': (33., 37.), 'z': (0., 1000.)}
FRYE_PUGH_1971_DOMAIN = {'t': (-3., 30.), 's': (33., 37.), 'p': (10.13, 9806.65)}
DEL_GROSSO_1974_DOMAIN = {'t': (0., 30.), 's': (30., 40.), 'p': (0., 9806.65)}
MEDWIN_1975_DOMAIN = {'t': (0., 35.), 's': (0., 45.), 'z': (0., 1000.)}
CHEN_MILLERO_1977_DOMAIN = {'t': (0., 40.), 's': (0., 40.), 'p': (0., 10000.)}
LOVETT_1978_DOMAIN = {'t': (0., 30.), 's': (30., 40.), 'p': (0., 10000.)}
ROSS_1978_DOMAIN = {'p': (0., 3000.)}
COPPENS_1980_DOMAIN = {'t': (None, 35.), 's': (None, 45.), 'z': (0., 4000.)}
MACKENZIE_1981_DOMAIN = {'t': (-2., 30.), 's': (25., 40.), 'z': (0., 8000.)}
LEROY_1969_DOMAIN = {
    Accuracy.SIMPLIFIED: {'t': (-2., 24.5), 's': (30., 42.), 'z': (0., 1000.)},
    Accuracy.BASIC: {'t': (-2., 34.), 's': (25., 42.), 'z': (0., 8000.)},
    Accuracy.COMPLETE: {'t': (-2., 34.), 's': (20., 42.)},
}
KINSLER_2000_DOMAIN = {'t': (-2., 30.), 's': (25., 40.), 'p': (0., 6000.)}
LEROY_2008_DOMAIN = {'s': (0., 42.)}

# --- pressure based formulas ---
def sound_speed_wilson_1960(t, s, p, equation=2, t_scale='its90',
                            domain_policy='ignore', log_file=None):
    '''Sound speed [m s-1] from Wilson's 1st (1960b) or 2nd (1960c) equation.
    p is the absolute pressure (including atmospheric) [dbar].'''
    equation = parse_selector(WilsonEquation, equation, 'equation')
    t, s, p = broadcast_inputs(t=t, s=s, p=p)
    check_domain('Wilson (1960) sound speed', WILSON_1960_DOMAIN[equation], domain_policy, log_file, t=t, s=s, p=p)
    table = WILSON_1960[equation]
    t = convert_temperature(t, t_scale, table.t_scale)
    return to_output(table.evaluate(t, s, p))

def sound_speed_frye_pugh_1971(t, s, p, t_scale='its90', domain_policy='ignore', log_file=None):
    '''Sound speed [m s-1] from Frye & Pugh (1971), a fit to Wilson's (1960a)
    data with a standard error of 0.1 m/s. p is the absolute pressure [dbar].'''
    t, s, p = broadcast_inputs(t=t, s=s, p=p)
    check_domain('Frye & Pugh (1971) sound speed', FRYE_PUGH_1971_DOMAIN, domain_policy, log_file, t=t, s=s, p=p)
    t = convert_temperature(t, t_scale, FRYE_PUGH_1971.t_scale)
    return to_output(FRYE_PUGH_1971.evaluate(t, s, p))

def sound_speed_del_grosso_1974(t, s, p, equation='won', t_scale='its90',
                                domain_policy='ignore', log_file=None):
    '''Sound speed [m s-1] from the NRLII equation (Del Grosso, 1974), either
    with the original coefficients ('gro') or those revised for ITS-90 by
    Wong & Zhu (1995) ('won', default).'''
    equation = parse_selector(DelGrossoEquation, equation, 'equation')
    t, s, p = broadcast_inputs(t=t, s=s, p=p)
    check_domain('Del Grosso (1974) sound speed', DEL_GROSSO_1974_DOMAIN, domain_policy, log_file, t=t, s=s, p=p)
    table = DEL_GROSSO_1974[equation]
    t = convert_temperature(t, t_scale, table.t_scale)
    return to_output(table.evaluate(t, s, p))

def sound_speed_chen_millero_1977(t, s, p, equation='won', t_scale='its90',
                                  domain_policy='ignore', log_file=None):
    '''Sound speed [m s-1] from the UNESCO equation (Chen & Millero, 1977),
    either as in UNESCO (1983) ('une') or with the Wong & Zhu (1995)
    coefficients for ITS-90 ('won', default).

    Check value (UNESCO, t in IPTS-68): t=40, s=40, p=10000 dbar: 1731.995 m/s.'''
    equation = parse_selector(ChenMilleroEquation, equation, 'equation')
    t, s, p = broadcast_inputs(t=t, s=s, p=p)
    check_domain('Chen & Millero (1977) sound speed', CHEN_MILLERO_1977_DOMAIN, domain_policy, log_file, t=t, s=s, p=p)
    table = CHEN_MILLERO_1977[equation]
    t = convert_temperature(t, t_scale, table.t_scale)
    return to_output(table.evaluate(t, s, p))

def sound_speed_lovett_1978(t, s, p, equation=2, t_scale='its90',
                            domain_policy='ignore', log_file=None):
    '''Sound speed [m s-1] from one of the three "merged" equations of
    Lovett (1978). Check values (t in IPTS-48) for t=2, s=34.7, p=6000 dbar:
    1559.462 (1st), 1559.393 (2nd), 1559.499 (3rd) m/s.'''
    equation = parse_selector(LovettEquation, equation, 'equation')
    t, s, p = broadcast_inputs(t=t, s=s, p=p)
    check_domain('Lovett (1978) sound speed', LOVETT_1978_DOMAIN, domain_policy, log_file, t=t, s=s, p=p)
    table = LOVETT_1978[equation]
    t = convert_temperature(t, t_scale, table.t_scale)
    return to_output(table.evaluate(t, s, p))

def sound_speed_ross_1978(t, s, p, t_scale='its90', domain_policy='ignore', log_file=None):
    '''Sound speed [m s-1] from Ross (1978). Not applicable below 3000 m.'''
    t, s, p = broadcast_inputs(t=t, s=s, p=p)
    check_domain('Ross (1978) sound speed', ROSS_1978_DOMAIN, domain_policy, log_file, t=t, s=s, p=p)
    t = convert_temperature(t, t_scale, ROSS_1978.t_scale)
    return to_output(ROSS_1978.evaluate(t, s, p))

def sound_speed_kinsler_2000(t, s, p, t_scale='its90', domain_policy='ignore', log_file=None):
    '''Sound speed [m s-1] from Kinsler et al. (2000), a fit to Del Grosso (1974)
    with a standard error of 0.1 m/s in open oceans.'''
    t, s, p = broadcast_inputs(t=t, s=s, p=p)
    check_domain('Kinsler et al. (2000) sound speed', KINSLER_2000_DOMAIN, domain_policy, log_file, t=t, s=s, p=p)
    t = convert_temperature(t, t_scale, 'ipts68')
    p = p/DBAR_PER_ATM
    S = s - 35
    c = (1449.08 + 4.57*t*np.exp(-t/86.9 - (t/360)**2) + 1.33*S*np.exp(-t/120)
         + 0.1522*p*np.exp(t/1200 + S/400) + 1.46e-5*p**2*np.exp(-t/20 + S/10))
    return to_output(c)

# --- depth based formulas ---
def sound_speed_kinsler_1962(t, s, z, t_scale='its90', domain_policy='ignore', log_file=None):
    '''Sound speed [m s-1] from Kinsler & Frey (1962), within 1 m/s of
    Wilson's 1st equation in open oceans.'''
    t, s, z = broadcast_inputs(t=t, s=s, z=z)
    check_domain('Kinsler & Frey (1962) sound speed', KINSLER_1962_DOMAIN, domain_policy, log_file, t=t, s=s, z=z)
    t = convert_temperature(t, t_scale, 'ipts48')
    c = 1449 + 4.6*t - 5.5e-2*t**2 + 3e-4*t**3 + (1.39 - 1.2e-2*t)*(s - 35) + 1.7e-2*z
    return to_output(c)

def sound_speed_medwin_1975(t, s, z, t_scale='its90', domain_policy='ignore', log_file=None):
    '''Sound speed [m s-1] from Medwin (1975), within 0.2 m/s of NRLII.'''
    t, s, z = broadcast_inputs(t=t, s=s, z=z)
    check_domain('Medwin (1975) sound speed', MEDWIN_1975_DOMAIN, domain_policy, log_file, t=t, s=s, z=z)
    t = convert_temperature(t, t_scale, 'ipts68')
    c = 1449.2 + 4.6*t - 5.5e-2*t**2 + 2.9e-4*t**3 + (1.34 - 1e-2*t)*(s - 35) + 1.6e-2*z
    return to_output(c)

def sound_speed_mackenzie_1981(t, s, z, t_scale='its90', domain_policy='ignore', log_file=None):
    '''Sound speed [m s-1] from the nine-term equation of Mackenzie (1981).
    Check value (t in IPTS-68): t=25, s=35, z=1000 m: 1550.744 m/s.'''
    t, s, z = broadcast_inputs(t=t, s=s, z=z)
    check_domain('Mackenzie (1981) sound speed', MACKENZIE_1981_DOMAIN, domain_policy, log_file, t=t, s=s, z=z)
    t = convert_temperature(t, t_scale, 'ipts68')
    S = s - 35
    c = (1448.96 + 4.591*t - 5.304e-2*t**2 + 2.374e-4*t**3 + 1.340*S + 1.630e-2*z
         + 1.675e-7*z**2 - 1.025e-2*t*S - 7.139e-13*t*z**3)
    return to_output(c)

def coppens_corrected_depth(z, lat) -> np.ndarray:
    '''Depth [km] from depth [m] corrected for latitude, exact at 45 deg.'''
    return m_to_km(z)*(1 - 2.6e-3*np.cos(2*np.deg2rad(lat)))

def sound_speed_coppens_1980(t, s, z, lat, equation='com', t_scale='its90',
                             domain_policy='ignore', log_file=None):
    '''Sound speed [m s-1] from Coppens (1980), a fit to Lovett's 3rd equation
    with the basic ('bas', 0.1 m/s) or complete ('com', 0.03 m/s) depth term.'''
    equation = parse_selector(CoppensEquation, equation, 'equation')
    t, s, z, lat = broadcast_inputs(t=t, s=s, z=z, lat=lat)
    check_domain('Coppens (1980) sound speed', COPPENS_1980_DOMAIN, domain_policy, log_file, t=t, s=s, z=z)
    z = coppens_corrected_depth(z, lat) # [km]
    T = convert_temperature(t, t_scale, 'ipts48')/10
    S = s - 35
    c0 = 1449.05 + 45.7*T - 5.21*T**2 + 0.23*T**3 + (1.333 - 0.126*T + 0.009*T**2)*S
    if equation is CoppensEquation.COMPLETE:
        dc = (16.23 + 0.253*T)*z + (0.213 - 0.1*T)*z**2 + (0.016 + 0.0002*S)*S*T*z
    else:
        dc = 16.3*z + 0.18*z**2
    return to_output(c0 + dc)

def sound_speed_leroy_1969(t, s, z, lat, equation=2, accuracy='com', t_scale='its90',
                           domain_policy='ignore', log_file=None):
    '''Sound speed [m s-1] from Leroy (1969). The accuracy level sets how
    many terms are added: 'sim' (c0), 'bas' (c0 + ca + cb) or
    'com' (c0 + ca + cb + cc + cd, default).'''
    equation = parse_selector(LeroyEquation, equation, 'equation')
    accuracy = parse_selector(Accuracy, accuracy, 'accuracy')
    t, s, z, lat = broadcast_inputs(t=t, s=s, z=z, lat=lat)
    check_domain('Leroy (1969) sound speed', LEROY_1969_DOMAIN[accuracy], domain_policy, log_file, t=t, s=s, z=z)
    t = convert_temperature(t, t_scale, 'ipts48')
    Z = m_to_km(z)
    S = s - 35

    c_ref = 1492.9 if equation is LeroyEquation.FIRST else 1493.
    c = c_ref + 3*(t - 10) - 6e-3*(t - 10)**2 - 4e-2*(t - 18)**2 + 1.2*S - 1e-2*(t - 18)*S + z/61
    if accuracy is Accuracy.SIMPLIFIED:
        return to_output(c)

    ca = 1e-1*Z**2 + 2e-4*Z**2*(t - 18)**2 + 1e-1*Z*lat/90
    if equation is LeroyEquation.FIRST:
        cb = 2e-7*t*(t - 10)**4
    else:
        cb = 2.6e-4*t*(t - 5)*(t - 25)
    c = c + ca + cb
    if accuracy is Accuracy.BASIC:
        return to_output(c)

    if equation is LeroyEquation.FIRST:
        cc = -5e-4*Z**2*(Z - 6)**2
        cd = 1.5e-3*S**2*(1 - Z)
    else:
        cc = -1e-3*Z**2*(Z - 4)*(Z - 8)
        cd = 1.5e-3*S**2*(1 - Z) + 3e-6*t**2*(t - 30)*S
    return to_output(c + cc + cd)

def sound_speed_leroy_2008(t, s, z, lat, t_scale='its90', domain_policy='ignore', log_file=None):
    '''Sound speed [m s-1] from Leroy, Robinson & Goldsmith (2008), within
    0.2 m/s of NRLII anywhere in the oceans and seas for s < 42 ppt.'''
    t, s, z, lat = broadcast_inputs(t=t, s=s, z=z, lat=lat)
    check_domain('Leroy et al. (2008) sound speed', LEROY_2008_DOMAIN, domain_policy, log_file, t=t, s=s, z=z)
    t = convert_temperature(t, t_scale, 'its90')
    c = (1402.5 + 5*t - 5.44e-2*t**2 + 2.1e-4*t**3 + 1.33*s - 1.23e-2*s*t
         + 8.7e-5*s*t**2 + 1.56e-2*z + 2.55e-7*z**2 - 7.3e-12*z**3 + 1.2e-6*z*(lat - 45)
         - 9.5e-13*t*z**3 + 3e-7*t**2*z + 1.43e-5*s*z)
    return to_output(c)
