from seawater_acoustics import absorption, sound_speed, density, depth_pressure
from seawater_acoustics.config import AcousticsConfig, get_config
from seawater_acoustics.errors import InvalidSelector
from seawater_acoustics.regions import Region, Leroy1968Region
from seawater_acoustics.sample import PhysicalSample
from seawater_acoustics.tools.units import TemperatureScale
from seawater_acoustics.tools.validation import parse_selector
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable
import pandas as pd

class Quantity(Enum):
    ABSORPTION = 'absorption'
    SOUND_SPEED = 'sound_speed'
    DENSITY = 'density'
    DEPTH_TO_PRESSURE = 'depth_to_pressure'
    PRESSURE_TO_DEPTH = 'pressure_to_depth'

@dataclass(frozen=True)
class FormulaVariant:
    quantity: Quantity
    tag: str
    function: Callable
    inputs: tuple
    unit: str
    reference: str
    t_scale: TemperatureScale = None # scale of the default sub-equation
    selectors: dict = field(default_factory=dict) # keyword: (Enum, default)
    domain: dict = field(default_factory=dict) # valid domain of the default sub-equation
    options: tuple = () # config driven keywords the function accepts

_TEMPERATURE_OPTIONS = ('t_scale', 'domain_policy', 'log_file')
_OUTPUT = {'output': (absorption.OutputMode, 'tot')}

all_variants = [
    # --- absorption [dB km-1] ---
    FormulaVariant(Quantity.ABSORPTION, 'FisherSimmons1977', absorption.absorption_fisher_simmons_1977,
                   ('t', 'z', 'f'), 'dB km-1', 'Fisher & Simmons (1977), J. Acoust. Soc. Am. 62, 558-564',
                   TemperatureScale.IPTS68, _OUTPUT, absorption.FISHER_SIMMONS_1977_DOMAIN, _TEMPERATURE_OPTIONS),
    FormulaVariant(Quantity.ABSORPTION, 'FrancoisGarrison1982', absorption.absorption_francois_garrison_1982,
                   ('t', 's', 'pH', 'z', 'f'), 'dB km-1', 'Francois & Garrison (1982), J. Acoust. Soc. Am. 72, 1879-1890',
                   TemperatureScale.IPTS68, _OUTPUT, absorption.FRANCOIS_GARRISON_1982_DOMAIN, _TEMPERATURE_OPTIONS),
    FormulaVariant(Quantity.ABSORPTION, 'AinslieMcColm1998', absorption.absorption_ainslie_mccolm_1998,
                   ('t', 's', 'pH', 'z', 'f'), 'dB km-1', 'Ainslie & McColm (1998), J. Acoust. Soc. Am. 103, 1671-1672',
                   TemperatureScale.IPTS68, _OUTPUT, absorption.AINSLIE_MCCOLM_1998_DOMAIN, _TEMPERATURE_OPTIONS),
    FormulaVariant(Quantity.ABSORPTION, 'Kinsler2000', absorption.absorption_kinsler_2000,
                   ('t', 's', 'pH', 'z', 'f'), 'dB km-1', 'Kinsler et al. (2000), Fundamentals of Acoustics, 4th ed.',
                   TemperatureScale.ITS90, _OUTPUT, absorption.KINSLER_2000_DOMAIN, _TEMPERATURE_OPTIONS),
    # --- sound speed [m s-1] ---
    FormulaVariant(Quantity.SOUND_SPEED, 'Wilson1960', sound_speed.sound_speed_wilson_1960,
                   ('t', 's', 'p'), 'm s-1', 'Wilson (1960), J. Acoust. Soc. Am. 32, 641-644 and 1357',
                   TemperatureScale.IPTS48, {'equation': (sound_speed.WilsonEquation, 2)},
                   sound_speed.WILSON_1960_DOMAIN[sound_speed.WilsonEquation.SECOND], _TEMPERATURE_OPTIONS),
    FormulaVariant(Quantity.SOUND_SPEED, 'Kinsler1962', sound_speed.sound_speed_kinsler_1962,
                   ('t', 's', 'z'), 'm s-1', 'Kinsler & Frey (1962), Fundamentals of Acoustics, 2nd ed.',
                   TemperatureScale.IPTS48, {}, sound_speed.KINSLER_1962_DOMAIN, _TEMPERATURE_OPTIONS),
    FormulaVariant(Quantity.SOUND_SPEED, 'FryePugh1971', sound_speed.sound_speed_frye_pugh_1971,
                   ('t', 's', 'p'), 'm s-1', 'Frye & Pugh (1971), J. Acoust. Soc. Am. 50, 384-386',
                   TemperatureScale.IPTS48, {}, sound_speed.FRYE_PUGH_1971_DOMAIN, _TEMPERATURE_OPTIONS),
    FormulaVariant(Quantity.SOUND_SPEED, 'DelGrosso1974', sound_speed.sound_speed_del_grosso_1974,
                   ('t', 's', 'p'), 'm s-1', 'Del Grosso (1974), J. Acoust. Soc. Am. 56, 1084-1091',
                   TemperatureScale.ITS90, {'equation': (sound_speed.DelGrossoEquation, 'won')},
                   sound_speed.DEL_GROSSO_1974_DOMAIN, _TEMPERATURE_OPTIONS),
    FormulaVariant(Quantity.SOUND_SPEED, 'Medwin1975', sound_speed.sound_speed_medwin_1975,
                   ('t', 's', 'z'), 'm s-1', 'Medwin (1975), J. Acoust. Soc. Am. 58, 1318-1319',
                   TemperatureScale.IPTS68, {}, sound_speed.MEDWIN_1975_DOMAIN, _TEMPERATURE_OPTIONS),
    FormulaVariant(Quantity.SOUND_SPEED, 'ChenMillero1977', sound_speed.sound_speed_chen_millero_1977,
                   ('t', 's', 'p'), 'm s-1', 'Chen & Millero (1977), J. Acoust. Soc. Am. 62, 1129-1135',
                   TemperatureScale.ITS90, {'equation': (sound_speed.ChenMilleroEquation, 'won')},
                   sound_speed.CHEN_MILLERO_1977_DOMAIN, _TEMPERATURE_OPTIONS),
    FormulaVariant(Quantity.SOUND_SPEED, 'Lovett1978', sound_speed.sound_speed_lovett_1978,
                   ('t', 's', 'p'), 'm s-1', 'Lovett (1978), J. Acoust. Soc. Am. 63, 1713-1718',
                   TemperatureScale.IPTS48, {'equation': (sound_speed.LovettEquation, 2)},
                   sound_speed.LOVETT_1978_DOMAIN, _TEMPERATURE_OPTIONS),
    FormulaVariant(Quantity.SOUND_SPEED, 'Ross1978', sound_speed.sound_speed_ross_1978,
                   ('t', 's', 'p'), 'm s-1', 'Ross (1978), Mechanics of Underwater Noise',
                   TemperatureScale.IPTS68, {}, sound_speed.ROSS_1978_DOMAIN, _TEMPERATURE_OPTIONS),
    FormulaVariant(Quantity.SOUND_SPEED, 'Coppens1980', sound_speed.sound_speed_coppens_1980,
                   ('t', 's', 'z', 'lat'), 'm s-1', 'Coppens (1981), J. Acoust. Soc. Am. 69, 862-863',
                   TemperatureScale.IPTS48, {'equation': (sound_speed.CoppensEquation, 'com')},
                   sound_speed.COPPENS_1980_DOMAIN, _TEMPERATURE_OPTIONS),
    FormulaVariant(Quantity.SOUND_SPEED, 'Mackenzie1981', sound_speed.sound_speed_mackenzie_1981,
                   ('t', 's', 'z'), 'm s-1', 'Mackenzie (1981), J. Acoust. Soc. Am. 70, 807-812',
                   TemperatureScale.IPTS68, {}, sound_speed.MACKENZIE_1981_DOMAIN, _TEMPERATURE_OPTIONS),
    FormulaVariant(Quantity.SOUND_SPEED, 'Leroy1969', sound_speed.sound_speed_leroy_1969,
                   ('t', 's', 'z', 'lat'), 'm s-1', 'Leroy (1969), J. Acoust. Soc. Am. 46, 216-226',
                   TemperatureScale.IPTS48, {'equation': (sound_speed.LeroyEquation, 2),
                                             'accuracy': (sound_speed.Accuracy, 'com')},
                   sound_speed.LEROY_1969_DOMAIN[sound_speed.Accuracy.COMPLETE], _TEMPERATURE_OPTIONS),
    FormulaVariant(Quantity.SOUND_SPEED, 'Kinsler2000', sound_speed.sound_speed_kinsler_2000,
                   ('t', 's', 'p'), 'm s-1', 'Kinsler et al. (2000), Fundamentals of Acoustics, 4th ed.',
                   TemperatureScale.IPTS68, {}, sound_speed.KINSLER_2000_DOMAIN, _TEMPERATURE_OPTIONS),
    FormulaVariant(Quantity.SOUND_SPEED, 'Leroy2008', sound_speed.sound_speed_leroy_2008,
                   ('t', 's', 'z', 'lat'), 'm s-1', 'Leroy, Robinson & Goldsmith (2008), J. Acoust. Soc. Am. 124, 2774-2782',
                   TemperatureScale.ITS90, {}, sound_speed.LEROY_2008_DOMAIN, _TEMPERATURE_OPTIONS),
    # --- density [kg m-3] ---
    FormulaVariant(Quantity.DENSITY, 'FofonoffMillard1983', density.density_fofonoff_millard_1983,
                   ('t', 's', 'p'), 'kg m-3', 'Fofonoff & Millard (1983), Unesco Tech. Pap. Mar. Sci. 44',
                   TemperatureScale.IPTS68, {}, density.FOFONOFF_MILLARD_1983_DOMAIN, _TEMPERATURE_OPTIONS),
    # --- depth to pressure [dbar] ---
    FormulaVariant(Quantity.DEPTH_TO_PRESSURE, 'Leroy1968', depth_pressure.depth_to_pressure_leroy_1968,
                   ('z', 'lat'), 'dbar', 'Leroy (1968), J. Acoust. Soc. Am. 44, 651-653',
                   selectors={'region': (Leroy1968Region, 0)}),
    FormulaVariant(Quantity.DEPTH_TO_PRESSURE, 'Leroy1988', depth_pressure.depth_to_pressure_leroy_1988,
                   ('z', 'lat'), 'dbar', 'Leroy (1988)'),
    FormulaVariant(Quantity.DEPTH_TO_PRESSURE, 'Lovett1978', depth_pressure.depth_to_pressure_lovett_1978,
                   ('z', 'lat'), 'dbar', 'Lovett (1978), J. Acoust. Soc. Am. 63, 1713-1718'),
    FormulaVariant(Quantity.DEPTH_TO_PRESSURE, 'LeroyParthiot1998', depth_pressure.depth_to_pressure_leroy_parthiot_1998,
                   ('z', 'lat'), 'dbar', 'Leroy & Parthiot (1998), J. Acoust. Soc. Am. 103, 1346-1352',
                   selectors={'region': (Region, 0)}, options=('log_file',)),
    # --- pressure to depth [m] ---
    FormulaVariant(Quantity.PRESSURE_TO_DEPTH, 'Ross1978', depth_pressure.pressure_to_depth_ross_1978,
                   ('p',), 'm', 'Ross (1978), Mechanics of Underwater Noise'),
    FormulaVariant(Quantity.PRESSURE_TO_DEPTH, 'BissetBerman1971', depth_pressure.pressure_to_depth_bisset_berman_1971,
                   ('p', 'lat'), 'm', 'Bisset-Berman Corp. (1971), Handbook of Oceanographic Tables'),
    FormulaVariant(Quantity.PRESSURE_TO_DEPTH, 'LeroyParthiot1998', depth_pressure.pressure_to_depth_leroy_parthiot_1998,
                   ('p', 'lat'), 'm', 'Leroy & Parthiot (1998), J. Acoust. Soc. Am. 103, 1346-1352',
                   selectors={'region': (Region, 0)}, options=('log_file',)),
]

def list_variants(quantity=None) -> list:
    if quantity is None:
        return list(all_variants)
    quantity = parse_selector(Quantity, quantity, 'quantity')
    return [variant for variant in all_variants if variant.quantity is quantity]

def get_variant(quantity, tag:str) -> FormulaVariant:
    '''Looks up a variant by quantity and author/year tag (case insensitive).'''
    variants = list_variants(quantity)
    for variant in variants:
        if isinstance(tag, str) and variant.tag.lower() == tag.lower():
            return variant
    options = ', '.join(variant.tag for variant in variants)
    raise InvalidSelector(f'Unknown formula {tag!r} for {variants[0].quantity.value}. Options are: {options}.')

def get_variant_table(quantity=None) -> pd.DataFrame:
    '''Overview of the available formulas, one row per variant.'''
    rows = []
    for variant in list_variants(quantity):
        rows.append({'quantity': variant.quantity.value,
                     'tag': variant.tag,
                     'inputs': ', '.join(variant.inputs),
                     'selectors': ', '.join(f'{name}={default!r}' for name, (_, default) in variant.selectors.items()),
                     'temperature_scale': variant.t_scale.value if variant.t_scale is not None else None,
                     'unit': variant.unit,
                     'reference': variant.reference})
    return pd.DataFrame(rows, columns=['quantity', 'tag', 'inputs', 'selectors',
                                       'temperature_scale', 'unit', 'reference'])

def evaluate(quantity, tag:str, sample:PhysicalSample, config:AcousticsConfig=None, **selectors):
    '''Evaluates one formula for a sample. Selectors not given keep the
    defaults of the formula; a missing latitude falls back to the
    configured default latitude.'''
    variant = get_variant(quantity, tag)
    if config is None:
        config = get_config()

    unknown = [name for name in selectors if name not in variant.selectors]
    if unknown:
        options = ', '.join(variant.selectors) or 'none'
        raise InvalidSelector(f'{variant.tag} does not take selector(s) {", ".join(unknown)}. Options are: {options}.')

    kwargs = sample.get_inputs(variant.inputs, defaults={'lat': config.default_latitude})
    for name, value in selectors.items():
        enum_class, _ = variant.selectors[name]
        kwargs[name] = parse_selector(enum_class, value, name)
    if 't_scale' in variant.options:
        kwargs['t_scale'] = sample.t_scale if sample.t_scale is not None else config.temperature_scale
    if 'domain_policy' in variant.options:
        kwargs['domain_policy'] = config.domain_policy
    if 'log_file' in variant.options:
        kwargs['log_file'] = config.log_file

    return variant.function(**kwargs)

# --- group dispatchers ---
def calculate_absorption(tag:str, sample:PhysicalSample, output='tot', config:AcousticsConfig=None):
    return evaluate(Quantity.ABSORPTION, tag, sample, config=config, output=output)

def calculate_sound_speed(tag:str, sample:PhysicalSample, config:AcousticsConfig=None, **selectors):
    return evaluate(Quantity.SOUND_SPEED, tag, sample, config=config, **selectors)

def calculate_density(sample:PhysicalSample, tag='FofonoffMillard1983', config:AcousticsConfig=None):
    return evaluate(Quantity.DENSITY, tag, sample, config=config)

def convert_depth_to_pressure(z, lat=None, tag='LeroyParthiot1998', config:AcousticsConfig=None, **selectors):
    return evaluate(Quantity.DEPTH_TO_PRESSURE, tag, PhysicalSample(z=z, lat=lat), config=config, **selectors)

def convert_pressure_to_depth(p, lat=None, tag='LeroyParthiot1998', config:AcousticsConfig=None, **selectors):
    return evaluate(Quantity.PRESSURE_TO_DEPTH, tag, PhysicalSample(p=p, lat=lat), config=config, **selectors)
