"""Contains the name for the logger of HermiteKit modules.

``hermitekit`` uses a simple logging system based on the
`Logging <https://docs.python.org/3/library/logging.html>`__ standard library.
Logging messages are grouped in different levels:

* ``DEBUG``: Sizes of the prepared datasets and of the computed polynomials.
* ``WARNING``: An indication that something unexpected
    happened which may require attention, e.g. two nodes sharing an abscissa.

By default, only messages of level ``WARNING`` are displayed.

Calling applications can configure the format and log level of the displayed messages
by `Configuring Logging <https://docs.python.org/3/howto/logging.html#configuring-logging>`__
for ``hermitekit.logger.hermitekit_logger``, e.g.::

    >>> import logging
    >>> logging.basicConfig(
    ...     level=logging.DEBUG,
    ...     format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    ... )
"""
import logging

logger_name = "hermitekit"
hermitekit_logger = logging.getLogger(logger_name)
