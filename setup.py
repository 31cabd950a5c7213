"""
Build script for the stringops package.
"""

# std
import shutil
from pathlib import Path

# third-party
from setuptools import Command, find_packages, setup


# ---------------------------------------------------------------------------- #
HERE = Path(__file__).parent


# Setuptools
# ---------------------------------------------------------------------------- #

class CleanCommand(Command):
    """Custom clean command to tidy up the project root."""

    user_options = []

    def initialize_options(self):
        pass

    def finalize_options(self):
        pass

    def run(self):
        for pattern in ('build', 'dist', '*.tgz', 'src/*.egg-info',
                        '**/__pycache__', '**/*.pyc'):
            for path in HERE.glob(pattern):
                print(f'removing {path}')
                if path.is_dir():
                    shutil.rmtree(path)
                else:
                    path.unlink()


# Main
# ---------------------------------------------------------------------------- #

setup(
    name='stringops',
    version='0.1.0',
    description='Small, stateless string utilities with type checked '
                'printf-style formatting.',
    long_description=(HERE / 'README.md').read_text(),
    long_description_content_type='text/markdown',
    python_requires='>=3.9',
    package_dir={'': 'src'},
    packages=find_packages('src', exclude=['tests', 'tests.*']),
    package_data={'stringops': ['config.yaml']},
    install_requires=[
        'loguru',
        'numpy',
        'platformdirs',
        'pyyaml'
    ],
    extras_require={
        'test': ['pytest']
    },
    cmdclass={'clean': CleanCommand}
)
