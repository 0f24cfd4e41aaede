import logging

from matplotlib.backends.backend_agg import FigureCanvasAgg as FigureCanvas
from matplotlib.figure import Figure
from matplotlib.ticker import FuncFormatter

LOGGER = logging.getLogger(__name__)

BAR_COLOR = '#e7b008'
LINE_COLOR = '#1f77b4'


def _thousands(value, _pos):
    return f"{value / 1000:g}k"


def _millions(value, _pos):
    return f"{value / 1000000:g}M"


def draw_daily(ax, daily):
    """Bar chart of the 7-day revenue series."""
    labels = [d.label for d in daily]
    values = [d.revenue for d in daily]
    ax.bar(labels, values, color=BAR_COLOR)
    ax.set_title('Daily Revenue (last 7 days)')
    ax.set_ylabel('Revenue (Rp)')
    ax.yaxis.set_major_formatter(FuncFormatter(_thousands))
    if not any(values):
        ax.text(0.5, 0.5, 'No sales in range', ha='center', va='center', transform=ax.transAxes)


def draw_monthly(ax, monthly):
    """Line chart of revenue per month. Months without sales are simply absent."""
    if monthly:
        ax.plot([m.month for m in monthly], [m.revenue for m in monthly], marker='o', color=LINE_COLOR)
        ax.set_title('Monthly Revenue')
        ax.set_xlabel('Month')
        ax.yaxis.set_major_formatter(FuncFormatter(_millions))
        ax.tick_params(axis='x', rotation=45)
    else:
        ax.text(0.5, 0.5, 'No sales recorded', ha='center', va='center')


def build_dashboard_figure(dashboard):
    fig = Figure(figsize=(10, 4))
    FigureCanvas(fig)
    ax1 = fig.add_subplot(121)
    ax2 = fig.add_subplot(122)
    draw_daily(ax1, dashboard.daily)
    draw_monthly(ax2, dashboard.monthly)
    fig.tight_layout()
    return fig


def render_dashboard(dashboard, path):
    """Write the daily and monthly revenue charts side by side to `path` (PNG)."""
    fig = build_dashboard_figure(dashboard)
    fig.savefig(path, format='png')
    LOGGER.info("Dashboard charts written to %s", path)
    return path
