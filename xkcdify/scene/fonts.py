"""
Font restyling of an axes' own text: title, axis labels and tick labels.
"""

from matplotlib.axes import Axes

from xkcdify.style import XkcdStyle


def change_all_text_fonts(ax: Axes, style: XkcdStyle):
    """Switch the title, axis labels and tick labels of ``ax`` to the xkcd font."""
    ax.tick_params(
        axis="both",
        which="both",
        labelsize=style.font_size,
        labelfontfamily=style.font_family,
    )

    ax.title.set_fontfamily(style.font_family)
    ax.title.set_fontsize(style.title_font_size)

    for label in (ax.xaxis.label, ax.yaxis.label):
        label.set_fontfamily(style.font_family)
        label.set_fontsize(style.font_size)
