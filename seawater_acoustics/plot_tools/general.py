from seawater_acoustics.tools import log
import matplotlib.pyplot as plt
from matplotlib.offsetbox import AnchoredText

def add_subtitle(ax:plt.axes, subtitle:str, location='upper left', alpha=1.0) -> plt.axes:
    anchored_text = AnchoredText(subtitle, loc=location, borderpad=0.0)
    anchored_text.patch.set_alpha(alpha)
    anchored_text.zorder = 15
    ax.add_artist(anchored_text)
    return ax

def save_or_show(ax:plt.axes, show:bool, output_path:str, dpi=300, log_file=None) -> plt.axes:
    '''Saves the figure if output_path is given, then either shows it or
    returns the axes for further use.'''
    if output_path is not None:
        log.info(f'Saving figure to: {output_path}', log_file)
        plt.savefig(output_path, bbox_inches='tight', dpi=dpi)

    if show is True:
        plt.show()
    else:
        return ax
