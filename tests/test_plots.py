from seawater_acoustics.plot_tools import plots_absorption, plots_sound_speed
from seawater_acoustics.plot_tools.general import add_subtitle
import matplotlib.pyplot as plt
import numpy as np
import pytest

f = np.logspace(-1, 3, 50)
z = np.linspace(0., 4000., 41)
t = 2. + 18.*np.exp(-z/500.)
s = np.full(z.shape, 35.)

@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close('all')

def test_add_subtitle():
    fig, ax = plt.subplots()
    assert add_subtitle(ax, '(a)') is ax
    assert len(ax.artists) == 1

def test_absorption_contributors_saved(tmp_path):
    output_path = tmp_path / 'contributors.png'
    ax = plots_absorption.plot_absorption_contributors(f, 10., 35., 8., 0., show=False, output_path=str(output_path))
    assert output_path.exists()
    assert len(ax.get_lines()) == 4

def test_absorption_variants():
    ax = plots_absorption.plot_absorption_variants(f, 10., 35., 8., 0., show=False)
    assert len(ax.get_lines()) == 4

def test_absorption_map(tmp_path):
    output_path = tmp_path / 'map.png'
    plots_absorption.plot_absorption_map(f, z, 10., 35., 8., show=False, output_path=str(output_path))
    assert output_path.exists()

def test_sound_speed_profiles():
    tags = ['Wilson1960', 'DelGrosso1974', 'Mackenzie1981', 'Leroy1969']
    ax = plots_sound_speed.plot_sound_speed_profiles(z, t, s, lat=45., tags=tags, show=False)
    assert len(ax.get_lines()) == len(tags)

def test_sound_speed_profile_pressure_and_depth_formulas_agree():
    c_pressure = plots_sound_speed.get_sound_speed_profile('ChenMillero1977', z, t, s, 45.)
    c_depth = plots_sound_speed.get_sound_speed_profile('Leroy2008', z, t, s, 45.)
    assert np.max(np.abs(c_pressure - c_depth)) < 1.5

def test_sound_speed_differences(tmp_path):
    output_path = tmp_path / 'differences.png'
    ax = plots_sound_speed.plot_sound_speed_differences(z, t, s, show=False, output_path=str(output_path))
    assert output_path.exists()
    assert len(ax.get_lines()) == len(plots_sound_speed.default_profile_tags)
