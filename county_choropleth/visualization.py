# county_choropleth/visualization.py

import logging
import os

from jinja2 import Environment, PackageLoader, select_autoescape

from .config import Config
from .pipeline import TITLE, ChoroplethMap
from .tooltip import POINTER_OFFSET

logger = logging.getLogger(__name__)

_environment = Environment(
    loader=PackageLoader('county_choropleth', 'templates'),
    autoescape=select_autoescape(['html'])
)

def render_page(choropleth: ChoroplethMap) -> str:
    """
    Wraps a rendered map into a standalone HTML page with the tooltip script.

    Args:
        choropleth (ChoroplethMap): The result of a render pass.

    Returns:
        str: The HTML document.
    """
    template = _environment.get_template('choropleth.html')
    return template.render(
        title=TITLE,
        canvas=choropleth.surface.to_markup(),
        pointer_offset=POINTER_OFFSET
    )

def save_choropleth_page(choropleth: ChoroplethMap, path: str = None) -> str:
    """
    Writes the HTML page for a rendered map and returns the file path.

    Args:
        choropleth (ChoroplethMap): The result of a render pass.
        path (str): Destination file. Defaults to Config.OUTPUT_PATH.

    Returns:
        str: Path to the saved HTML file.
    """
    path = path or Config.OUTPUT_PATH
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    try:
        with open(path, 'w', encoding='utf-8') as page:
            page.write(render_page(choropleth))
    except OSError as e:
        logger.error(f"Failed to write choropleth page: {e}")
        raise

    logger.info(f"Choropleth map saved as '{path}'.")
    return path
