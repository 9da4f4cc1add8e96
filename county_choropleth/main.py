# county_choropleth/main.py

import logging
import sys

from .config import Config
from .exceptions import ChoroplethError, FetchError, JoinMismatchError
from .loader import load_datasets
from .pipeline import render_choropleth
from .visualization import save_choropleth_page

logger = logging.getLogger(__name__)

def configure_logging():
    """
    Sends log records to the configured log file.
    """
    logging.basicConfig(
        filename=Config.LOG_FILE,
        level=Config.LOG_LEVEL,
        format='%(asctime)s:%(levelname)s:%(name)s:%(message)s'
    )

def run(urls=None, output_path=None) -> str:
    """
    Fetches both datasets, renders the map and saves the HTML page.

    Args:
        urls (List[str]): Education and counties URLs, in that order. Defaults to the configured URLs.
        output_path (str): Destination file. Defaults to Config.OUTPUT_PATH.

    Returns:
        str: Path to the saved HTML page.

    Raises:
        FetchError: If either dataset cannot be fetched. Nothing is rendered.
        JoinMismatchError: If a county has no education record. Nothing is written.
    """
    urls = urls or Config.dataset_urls()
    for url in urls:
        logger.info(f"Dataset source: {url}")

    education_data, topology = load_datasets(urls)
    choropleth = render_choropleth(education_data, topology)
    return save_choropleth_page(choropleth, output_path)

def handle_error(message, exception):
    """
    Logs a fatal error and returns the process exit status.
    """
    logger.error(f"{message}: {exception}")
    return 1

def main() -> int:
    configure_logging()
    try:
        Config.validate()
        logger.info("Configuration validated successfully.")
    except ValueError as e:
        return handle_error("Invalid configuration", e)

    try:
        run()
    except FetchError as e:
        return handle_error("Dataset download failed", e)
    except JoinMismatchError as e:
        return handle_error("Datasets could not be joined", e)
    except ChoroplethError as e:
        return handle_error("Rendering failed", e)
    except OSError as e:
        return handle_error("Failed to write page", e)
    return 0

if __name__ == "__main__":
    sys.exit(main())
