from seawater_acoustics.absorption import CONTRIBUTORS
from seawater_acoustics.config import AcousticsConfig, get_config
from seawater_acoustics.plot_tools.general import add_subtitle, save_or_show
from seawater_acoustics.registry import Quantity, calculate_absorption, list_variants
from seawater_acoustics.sample import PhysicalSample
import matplotlib.pyplot as plt
import matplotlib.colors as colors
import cmocean
import numpy as np

contributor_colors = ['#1e1677', '#900C3F', '#2e8b57']

def plot_absorption_contributors(f:np.ndarray, t:float, s:float, pH:float, z:float,
                                 tag='FrancoisGarrison1982', ax=None, config:AcousticsConfig=None,
                                 show=True, output_path=None) -> plt.axes:
    '''Total absorption and the boric acid, magnesium sulphate and pure water
    contributions against frequency [kHz].'''
    if config is None:
        config = get_config()
    if ax is None:
        fig = plt.figure(figsize=(8, 6))
        ax = plt.axes()

    sample = PhysicalSample(t=t, s=s, pH=pH, z=z, f=f)
    alpha_parts = calculate_absorption(tag, sample, output='par', config=config)
    alpha = calculate_absorption(tag, sample, config=config)

    ax.loglog(f, alpha, '-k', linewidth=2, label='Total')
    for i, contributor in enumerate(CONTRIBUTORS):
        ax.loglog(f, alpha_parts[..., i], '--', color=contributor_colors[i], label=contributor)

    ax.set_xlabel('Frequency (kHz)')
    ax.set_ylabel('Absorption (dB km$^{-1}$)')
    ax.set_xlim([np.min(f), np.max(f)])
    ax.grid(True, which='both', linestyle='--', alpha=0.5)
    ax.legend(loc='lower right')
    add_subtitle(ax, f'{tag}\nt = {t} $^o$C, s = {s} ppt, pH = {pH}, z = {z} m')

    return save_or_show(ax, show, output_path, dpi=config.dpi, log_file=config.log_file)

def plot_absorption_variants(f:np.ndarray, t:float, s:float, pH:float, z:float,
                             tags=None, ax=None, config:AcousticsConfig=None,
                             show=True, output_path=None) -> plt.axes:
    '''Comparison of absorption formulas against frequency [kHz].'''
    if config is None:
        config = get_config()
    if tags is None:
        tags = [variant.tag for variant in list_variants(Quantity.ABSORPTION)]
    if ax is None:
        fig = plt.figure(figsize=(8, 6))
        ax = plt.axes()

    sample = PhysicalSample(t=t, s=s, pH=pH, z=z, f=f)
    for tag in tags:
        ax.loglog(f, calculate_absorption(tag, sample, config=config), label=tag)

    ax.set_xlabel('Frequency (kHz)')
    ax.set_ylabel('Absorption (dB km$^{-1}$)')
    ax.grid(True, which='both', linestyle='--', alpha=0.5)
    ax.legend(loc='lower right')

    return save_or_show(ax, show, output_path, dpi=config.dpi, log_file=config.log_file)

def plot_absorption_map(f:np.ndarray, z:np.ndarray, t:float, s:float, pH:float,
                        tag='FrancoisGarrison1982', ax=None, cmap=cmocean.cm.amp,
                        config:AcousticsConfig=None, show=True, output_path=None) -> plt.axes:
    '''Absorption over frequency [kHz] and depth [m] on a logarithmic
    colour scale, depth increasing downwards.'''
    if config is None:
        config = get_config()
    if ax is None:
        fig = plt.figure(figsize=(8, 6))
        ax = plt.axes()

    f2d, z2d = np.meshgrid(f, z)
    alpha = calculate_absorption(tag, PhysicalSample(t=t, s=s, pH=pH, z=z2d, f=f2d), config=config)

    c = ax.pcolormesh(f2d, z2d, alpha, cmap=cmap, norm=colors.LogNorm(vmin=np.min(alpha), vmax=np.max(alpha)))
    cbar = plt.colorbar(c)
    cbar.set_label('Absorption (dB km$^{-1}$)')

    ax.set_xscale('log')
    ax.set_xlabel('Frequency (kHz)')
    ax.set_ylabel('Depth (m)')
    ax.invert_yaxis()
    add_subtitle(ax, tag)

    return save_or_show(ax, show, output_path, dpi=config.dpi, log_file=config.log_file)
