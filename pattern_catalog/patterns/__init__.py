"""
Design pattern demos.

Each module in this package is a self-contained example of one classic
design pattern. Its ``main`` driver is registered with the ``@demo``
decorator and is picked up by ``DemoRegistry.discover_package``; every
module can also be run on its own with ``python -m``.
"""
