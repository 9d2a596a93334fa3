from seawater_acoustics.config import AcousticsConfig, get_config
from seawater_acoustics.plot_tools.general import add_subtitle, save_or_show
from seawater_acoustics.registry import (Quantity, get_variant, calculate_sound_speed,
                                         convert_depth_to_pressure)
from seawater_acoustics.sample import PhysicalSample
from seawater_acoustics.tools.units import DBAR_PER_ATM
import matplotlib.pyplot as plt
import numpy as np

# formulas fitted to absolute pressure (including the atmosphere)
absolute_pressure_tags = ['Wilson1960', 'FryePugh1971']

default_profile_tags = ['DelGrosso1974', 'ChenMillero1977', 'Mackenzie1981', 'Leroy2008']

def get_sound_speed_profile(tag:str, z:np.ndarray, t:np.ndarray, s:np.ndarray, lat:float,
                            region=0, config:AcousticsConfig=None) -> np.ndarray:
    '''Sound speed along a depth profile. Pressure based formulas get the
    pressure from depth with Leroy & Parthiot (1998) for the given region.'''
    variant = get_variant(Quantity.SOUND_SPEED, tag)
    if 'p' in variant.inputs:
        p = convert_depth_to_pressure(z, lat, config=config, region=region)
        if variant.tag in absolute_pressure_tags:
            p = p + DBAR_PER_ATM
        sample = PhysicalSample(t=t, s=s, p=p, lat=lat)
    else:
        sample = PhysicalSample(t=t, s=s, z=z, lat=lat)
    return calculate_sound_speed(variant.tag, sample, config=config)

def plot_sound_speed_profiles(z:np.ndarray, t:np.ndarray, s:np.ndarray, lat=45., region=0,
                              tags=None, ax=None, config:AcousticsConfig=None,
                              show=True, output_path=None) -> plt.axes:
    if config is None:
        config = get_config()
    if tags is None:
        tags = default_profile_tags
    if ax is None:
        fig = plt.figure(figsize=(5, 8))
        ax = plt.axes()

    for tag in tags:
        c = get_sound_speed_profile(tag, z, t, s, lat, region=region, config=config)
        ax.plot(c, z, label=tag)

    ax.set_xlabel('Sound speed (m s$^{-1}$)')
    ax.set_ylabel('Depth (m)')
    ax.set_ylim([np.max(z), np.min(z)])
    ax.grid(True, linestyle='--', alpha=0.5)
    ax.legend(loc='lower left')
    add_subtitle(ax, f'lat = {lat}$^o$', location='upper right')

    return save_or_show(ax, show, output_path, dpi=config.dpi, log_file=config.log_file)

def plot_sound_speed_differences(z:np.ndarray, t:np.ndarray, s:np.ndarray, lat=45., region=0,
                                 reference_tag='Leroy2008', tags=None, ax=None,
                                 config:AcousticsConfig=None, show=True, output_path=None) -> plt.axes:
    '''Difference of each formula with a reference formula along a profile.'''
    if config is None:
        config = get_config()
    if tags is None:
        tags = [tag for tag in default_profile_tags if tag != reference_tag]
    if ax is None:
        fig = plt.figure(figsize=(5, 8))
        ax = plt.axes()

    c_ref = get_sound_speed_profile(reference_tag, z, t, s, lat, region=region, config=config)
    for tag in tags:
        c = get_sound_speed_profile(tag, z, t, s, lat, region=region, config=config)
        ax.plot(c - c_ref, z, label=tag)

    ax.plot([0, 0], [np.min(z), np.max(z)], '-k', linewidth=0.5)
    ax.set_xlabel(f'Difference with {reference_tag} (m s$^{{-1}}$)')
    ax.set_ylabel('Depth (m)')
    ax.set_ylim([np.max(z), np.min(z)])
    ax.grid(True, linestyle='--', alpha=0.5)
    ax.legend(loc='lower left')

    return save_or_show(ax, show, output_path, dpi=config.dpi, log_file=config.log_file)
