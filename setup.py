from setuptools import setup, find_packages

setup(
    name='county-choropleth',
    version='1.0.0',
    description='Choropleth map of higher education rates by US county',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    license='MIT',
    python_requires='>=3.9',
    packages=find_packages(exclude=['tests']),
    package_data={'county_choropleth': ['templates/*.html']},
    include_package_data=True,
    install_requires=[
        'numpy>=1.21',
        'requests>=2.25,<3.0',
        'shapely>=2.0',
        'plotly>=5.0',
        'python-dotenv>=0.19',
        'Jinja2>=3.0',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    entry_points={
        'console_scripts': [
            'county-choropleth = county_choropleth.main:main',
        ],
    },
)
