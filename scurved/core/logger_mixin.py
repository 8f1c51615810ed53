
import logging
from typing import Any, Iterable, Sequence

import numpy as np
from tabulate import tabulate


class LoggerMixin:
    """
    Mixin attaching a class-specific logger to solvers and sections.

    The logger is named ``<module>.<class>``, silent by default (a
    ``NullHandler`` at ``WARNING``) and switched to formatted ``DEBUG``
    output on stderr when the instance is created with ``debug=True``.
    Dataclasses declaring a ``debug`` field get the logger before their
    own ``__post_init__`` runs.

    Parameters
    ----------
    debug : bool, optional
        Enables debug-level logging output if True. Default is False.

    Attributes
    ----------
    logger : logging.Logger
        The logger configured for the concrete subclass.
    """

    _formatter = logging.Formatter(
        fmt=(
            "%(asctime)s [%(levelname)s] %(name)s.%(funcName)s():%(lineno)d "
            "- %(message)s"
        ),
        datefmt="%H:%M:%S",
    )

    def __init__(self, *args: Any, debug: bool = False, **kwargs: Any):
        self._logger = logging.getLogger(
            f"{self.__class__.__module__}.{self.__class__.__name__}"
        )
        self._logger.propagate = False

        if not self._logger.handlers:
            self._logger.addHandler(logging.NullHandler())

        self._logger.setLevel(logging.WARNING)

        if debug:
            # one stream handler per logger, shared by all instances
            if not any(isinstance(h, logging.StreamHandler)
                       for h in self._logger.handlers):
                sh = logging.StreamHandler()
                sh.setFormatter(self._formatter)
                self._logger.addHandler(sh)
            self._logger.setLevel(logging.DEBUG)

        self._logger.debug(
            "Instantiated %s(debug=%s)", self.__class__.__name__, debug
        )

    @property
    def logger(self) -> logging.Logger:
        """
        Returns the logger instance associated with this object.

        Returns
        -------
        logging.Logger
            The configured logger.
        """
        if not hasattr(self, "_logger"):
            LoggerMixin.__init__(self)
        return self._logger

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)

        has_debug = "debug" in getattr(cls, "__annotations__", {})

        # Dataclass: set up the logger in front of __post_init__
        orig_post = getattr(cls, "__post_init__", None)
        if orig_post is not None and has_debug:
            def wrapped_post(self, *a, **k):
                LoggerMixin.__init__(self, debug=getattr(self, "debug", False))
                return orig_post(self, *a, **k)

            cls.__post_init__ = wrapped_post
            return

        # Plain class with its own __init__
        orig_init = getattr(cls, "__init__", None)
        if orig_init is not LoggerMixin.__init__:

            def wrapped_init(self, *a, **k):
                LoggerMixin.__init__(self, debug=k.get("debug", False))
                if orig_init is not None:
                    return orig_init(self, *a, **k)

            cls.__init__ = wrapped_init


def table_scalars(rows: Iterable[Sequence[Any]], decimals: int = 6):
    """Grid table of ``(quantity, symbol, value)`` rows."""
    return tabulate(list(rows), headers=["Quantity", "Symbol", "Value"],
                    tablefmt="grid", floatfmt=f".{decimals}g")


def table_columns(columns, headers, decimals: int = 6):
    """Grid table of equally long column vectors, one row per station."""
    data = np.column_stack([np.asarray(c, dtype=float) for c in columns])
    index = np.arange(1, data.shape[0] + 1)
    return tabulate(
        [[i] + row.tolist() for i, row in zip(index, data)],
        headers=["Nr."] + list(headers), tablefmt="grid",
        floatfmt=f".{decimals}g"
    )
