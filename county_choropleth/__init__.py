# county_choropleth/__init__.py

from .colors import ColorScale
from .exceptions import ChoroplethError, FetchError, JoinMismatchError, TopologyError
from .join import JoinIndex
from .legend import legend_thresholds
from .loader import load_datasets
from .pipeline import render_choropleth
from .tooltip import TooltipController
