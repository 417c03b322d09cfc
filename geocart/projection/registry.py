# -*- coding: utf-8 -*-
"""
Projection Registry - Look up map projections by name.

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

import logging
from typing import Dict, List, Type

from geocart.projection.base import Projection
from geocart.projection.equirectangular import Equirectangular

logger = logging.getLogger(__name__)


_PROJECTION_REGISTRY: Dict[str, Type[Projection]] = {
    'equirectangular': Equirectangular,
}


def register_projection(name: str, projection: Type[Projection]) -> None:
    """
    Make a projection class available through ``get_projection``.

    Parameters
    ----------
    name : str
        Lookup name (case-insensitive). An existing entry is replaced.
    projection : type
        A ``Projection`` subclass.

    Raises
    ------
    TypeError
        If ``projection`` is not a ``Projection`` subclass.
    """
    if not (isinstance(projection, type) and issubclass(projection, Projection)):
        raise TypeError(
            f"projection must be a Projection subclass, got {projection!r}"
        )
    logger.debug("Registering projection %r -> %s", name, projection.__name__)
    _PROJECTION_REGISTRY[name.lower()] = projection


def get_projection_list() -> List[str]:
    """
    Return list of available projection names.

    Returns
    -------
    list of str
        Available projection names.
    """
    return list(_PROJECTION_REGISTRY.keys())


def get_projection(name: str, **kwargs) -> Projection:
    """
    Build a projection by name.

    Parameters
    ----------
    name : str
        Projection name (e.g., 'equirectangular').
    **kwargs
        Configuration passed to the projection constructor
        (e.g., ``radius``).

    Returns
    -------
    Projection
        The configured projection.

    Raises
    ------
    KeyError
        If name is not a registered projection.
    """
    if name.lower() not in _PROJECTION_REGISTRY:
        raise KeyError(
            f"Unknown projection '{name}'. Available: {get_projection_list()}"
        )
    return _PROJECTION_REGISTRY[name.lower()](**kwargs)


__all__ = [
    "register_projection",
    "get_projection_list",
    "get_projection",
]
