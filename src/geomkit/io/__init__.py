"""I/O utilities for geomkit."""

from .geometry_json import dumps, from_json_dict, loads, to_json_dict

__all__ = ['dumps', 'loads', 'to_json_dict', 'from_json_dict']
