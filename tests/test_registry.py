from seawater_acoustics import registry, sound_speed, absorption
from seawater_acoustics.config import get_config
from seawater_acoustics.errors import InvalidSelector, MissingInput, DomainWarning, DomainError
from seawater_acoustics.registry import Quantity
from seawater_acoustics.sample import PhysicalSample
import numpy as np
import pandas as pd
import pytest

samples = {
    Quantity.ABSORPTION: PhysicalSample(t=np.array([5., 15.]), s=35., pH=8., z=100., f=10.),
    Quantity.SOUND_SPEED: PhysicalSample(t=np.array([5., 15.]), s=35., p=1000., z=1000., lat=30.),
    Quantity.DENSITY: PhysicalSample(t=np.array([5., 15.]), s=35., p=1000.),
    Quantity.DEPTH_TO_PRESSURE: PhysicalSample(z=np.array([100., 1000.]), lat=30.),
    Quantity.PRESSURE_TO_DEPTH: PhysicalSample(p=np.array([100., 1000.]), lat=30.),
}

def test_variant_counts():
    assert len(registry.list_variants(Quantity.ABSORPTION)) == 4
    assert len(registry.list_variants('sound_speed')) == 13
    assert len(registry.list_variants(Quantity.DENSITY)) == 1
    assert len(registry.list_variants(Quantity.DEPTH_TO_PRESSURE)) == 4
    assert len(registry.list_variants(Quantity.PRESSURE_TO_DEPTH)) == 3
    assert len(registry.list_variants()) == 25

def test_tags_unique_per_quantity():
    keys = [(variant.quantity, variant.tag) for variant in registry.all_variants]
    assert len(keys) == len(set(keys))

@pytest.mark.parametrize('variant', registry.all_variants, ids=lambda v: f'{v.quantity.value}-{v.tag}')
def test_every_variant_evaluates_with_broadcast_shape(variant):
    result = registry.evaluate(variant.quantity, variant.tag, samples[variant.quantity])
    assert result.shape == (2,)
    assert np.all(np.isfinite(result))

def test_get_variant_case_insensitive():
    variant = registry.get_variant('sound_speed', 'mackenzie1981')
    assert variant.function is sound_speed.sound_speed_mackenzie_1981

def test_get_variant_unknown_tag_and_quantity():
    with pytest.raises(InvalidSelector):
        registry.get_variant(Quantity.SOUND_SPEED, 'Mackenzie1982')
    with pytest.raises(InvalidSelector):
        registry.get_variant('viscosity', 'Mackenzie1981')

def test_variant_table():
    table = registry.get_variant_table()
    assert isinstance(table, pd.DataFrame)
    assert len(table) == 25
    leroy = table[(table['quantity'] == 'sound_speed') & (table['tag'] == 'Leroy1969')].iloc[0]
    assert leroy['inputs'] == 't, s, z, lat'
    assert leroy['selectors'] == "equation=2, accuracy='com'"
    assert leroy['temperature_scale'] == 'ipts48'

def test_evaluate_matches_direct_call():
    sample = PhysicalSample(t=10., s=35., p=1000.)
    c = registry.calculate_sound_speed('ChenMillero1977', sample, equation='une')
    assert c == sound_speed.sound_speed_chen_millero_1977(10., 35., 1000., equation='une')

def test_evaluate_uses_sample_temperature_scale():
    sample = PhysicalSample(t=2., s=34.7, p=6000., t_scale='ipts48')
    c = registry.calculate_sound_speed('Lovett1978', sample, equation=1)
    assert np.isclose(c, 1559.462, atol=2e-3)

def test_absorption_output_modes():
    sample = samples[Quantity.ABSORPTION]
    total = registry.calculate_absorption('FrancoisGarrison1982', sample)
    parts = registry.calculate_absorption('FrancoisGarrison1982', sample, output='par')
    assert parts.shape == (2, 3)
    assert np.allclose(parts.sum(axis=-1), total)
    with pytest.raises(InvalidSelector):
        registry.calculate_absorption('FrancoisGarrison1982', sample, output='all')

def test_unknown_selector_keyword():
    with pytest.raises(InvalidSelector):
        registry.calculate_sound_speed('Mackenzie1981', samples[Quantity.SOUND_SPEED], equation=1)

def test_missing_input():
    with pytest.raises(MissingInput):
        registry.calculate_absorption('FrancoisGarrison1982', PhysicalSample(t=10., s=35., f=10.))

def test_missing_latitude_uses_configured_default():
    p_default = registry.convert_depth_to_pressure(1000.)
    p_45 = registry.convert_depth_to_pressure(1000., 45.)
    assert p_default == p_45

def test_depth_pressure_dispatchers():
    p = registry.convert_depth_to_pressure(np.array([500., 1500.]), 80., region='arctic_ocean')
    z = registry.convert_pressure_to_depth(p, 80., region=5)
    assert np.allclose(z, [500., 1500.], atol=0.2)
    assert registry.convert_pressure_to_depth(1000., tag='Ross1978') > 0

def test_calculate_density_default_formula():
    rho = registry.calculate_density(PhysicalSample(t=5., s=35., p=0., t_scale='ipts68'))
    assert np.isclose(rho, 1027.67547, atol=1e-5)

def test_config_domain_policy_is_applied(ini_file):
    sample = PhysicalSample(t=10., s=35., z=9000.)
    warn_config = get_config(ini_file('[validation]\ndomain_policy = warn\n'))
    with pytest.warns(DomainWarning) as record:
        registry.calculate_sound_speed('Mackenzie1981', sample, config=warn_config)
    assert record.pop(DomainWarning).filename == __file__
    raise_config = get_config(ini_file('[validation]\ndomain_policy = raise\n'))
    with pytest.raises(DomainError):
        registry.calculate_sound_speed('Mackenzie1981', sample, config=raise_config)

def test_config_temperature_scale_is_applied(ini_file):
    config = get_config(ini_file('[defaults]\ntemperature_scale = ipts68\n'))
    sample = PhysicalSample(t=25., s=35., z=1000.)
    c = registry.calculate_sound_speed('Mackenzie1981', sample, config=config)
    assert np.isclose(c, 1550.744, atol=1e-3)

def test_output_mode_enum_reexported():
    assert registry.get_variant('absorption', 'Kinsler2000').selectors['output'][0] is absorption.OutputMode
