from setuptools import setup

with open("./README.md") as f:
    long_description = f.read()

setup(
    name="persistent-avl",
    description=("Persistent AVL trees with incremental rebalancing and an"
                 + " ordered map built on them"),
    long_description=long_description,
    long_description_content_type="text/x-markdown",
    packages=['avl_map'],
    version='0.1',
    extras_require={
        'test': ['pytest'],
    },
    classifiers=[
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Operating System :: OS Independent",
        "License :: OSI Approved :: MIT License",
    ])
