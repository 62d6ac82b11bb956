import sys

from setuptools import setup

sys.path.insert(0, 'lightroom')
from _version import __author__, __version__  # noqa: E402

setup(
    name='lightroom',
    version=__version__,
    license='MIT',
    author=__author__,
    packages=['lightroom'],
    install_requires=[],
    extras_require={
        'test': ['pytest', 'pytest-mock']
    },
    entry_points={
        'console_scripts': ['lightroom=lightroom.__main__:main']
    },
    description='A single slider to control the brightness of the primary display through xrandr',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    classifiers=[
        'Development Status :: 4 - Beta',
        'License :: OSI Approved :: MIT License',
        'Operating System :: POSIX :: Linux',
        'Environment :: X11 Applications',
        'Programming Language :: Python :: 3 :: Only'
    ],
    python_requires='>=3.7'
)
