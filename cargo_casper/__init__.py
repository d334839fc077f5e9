"""cargo-casper -- scaffolds Casper smart-contract projects.

Quick usage::

    cargo casper my-project
    cd my-project
    make prepare
    make test
"""

__version__ = "2.1.0"
