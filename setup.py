from setuptools import setup, find_packages

setup(
    name="xkcdify",
    version="0.1.0",
    description="Redraw existing matplotlib charts in a hand-drawn xkcd style",
    author="Your Name",
    author_email="horaja@cs.cmu.edu",
    packages=find_packages(exclude=["tests", "tests.*", "scripts"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.21.0",
        "scipy>=1.7.0",
        "matplotlib>=3.8.0",
        "pyyaml>=5.4.0",
        "tqdm>=4.62.0",
    ],
    extras_require={
        "dev": ["pytest>=6.2.0", "black>=21.0", "flake8>=3.9.0"],
    },
)
