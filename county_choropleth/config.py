#config.py
import os
import re
from dotenv import load_dotenv
import logging

load_dotenv()

HEX_COLOR = re.compile(r'^#[0-9a-fA-F]{6}$')

class Config:
    """
    Configuration class that holds all settings and parameters for the choropleth renderer.
    """

    # Logging configuration
    LOG_FILE = os.getenv('LOG_FILE', 'county_choropleth.log')
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    # Dataset sources
    EDUCATION_URL = os.getenv(
        'EDUCATION_URL',
        'https://cdn.freecodecamp.org/testable-projects-fcc/data/choropleth_map/for_user_education.json'
    )
    COUNTIES_URL = os.getenv(
        'COUNTIES_URL',
        'https://cdn.freecodecamp.org/testable-projects-fcc/data/choropleth_map/counties.json'
    )
    REQUEST_TIMEOUT = int(os.getenv('REQUEST_TIMEOUT', '60'))  # In seconds

    # Output
    OUTPUT_PATH = os.getenv('OUTPUT_PATH', 'static/choropleth_map.html')

    # Legend and color mapping. Hue and lightness match, only saturation differs.
    LEGEND_STEP_COUNT = int(os.getenv('LEGEND_STEP_COUNT', '10'))
    LOW_COLOR = os.getenv('LOW_COLOR', '#c21d00')
    PIVOT_COLOR = os.getenv('PIVOT_COLOR', '#ffff33')
    HIGH_COLOR = os.getenv('HIGH_COLOR', '#00941b')
    STATE_STROKE_COLOR = os.getenv('STATE_STROKE_COLOR', '#322a2a')

    @classmethod
    def dataset_urls(cls):
        """
        Returns the dataset URLs in the order the pipeline consumes them: education first, then counties.
        """
        return [cls.EDUCATION_URL, cls.COUNTIES_URL]

    @classmethod
    def validate(cls):
        """
        Validates the configuration parameters to ensure they are set correctly.
        """
        for name in ('EDUCATION_URL', 'COUNTIES_URL'):
            if not getattr(cls, name):
                raise ValueError(f"Missing dataset URL: {name}. Please set it in the .env file.")

        if cls.REQUEST_TIMEOUT <= 0:
            raise ValueError("REQUEST_TIMEOUT must be a positive integer.")
        if cls.LEGEND_STEP_COUNT <= 0:
            raise ValueError("LEGEND_STEP_COUNT must be a positive integer.")

        for name in ('LOW_COLOR', 'PIVOT_COLOR', 'HIGH_COLOR', 'STATE_STROKE_COLOR'):
            if not HEX_COLOR.match(getattr(cls, name)):
                raise ValueError(f"{name} must be a hex color such as '#c21d00'.")

        output_dir = os.path.dirname(cls.OUTPUT_PATH)
        if output_dir and not os.path.exists(output_dir):
            logging.warning(f"Output directory does not exist: {output_dir}. It will be created.")

        return True
