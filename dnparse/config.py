"""Provides support for setting global parsing defaults via config files and dicts"""

from __future__ import absolute_import
import json
import yaml

from .dn import DistinguishedName


def _default_mapper(val):
    return val


def _bool_mapper(val):
    if isinstance(val, str):
        lval = val.strip().lower()
        if lval in ('true', 'yes', 'on', '1'):
            return True
        elif lval in ('false', 'no', 'off', '0'):
            return False
        raise ValueError('Not a boolean config value: {0}'.format(val))
    return bool(val)


_global_mappers = {
    'DEFAULT_TYPE_CASE_SENSITIVE': _bool_mapper,
    'DEFAULT_VALUE_CASE_SENSITIVE': _bool_mapper,
    'DEFAULT_STRICT': _bool_mapper,
}


def normalize_global_config_param(key):
    """Normalize a global config key. Does not check validity of the key.

    :param str key: User-supplied global config key
    :return: The normalized key formatted as an attribute of :class:`.DistinguishedName`
    :rtype: str
    """
    key = key.upper()
    if not key.startswith('DEFAULT_'):
        key = 'DEFAULT_'+key
    return key


def set_global_config(global_config_dict):
    """Set the global defaults. The dict must be formatted as follows::

        {'global': {
            <config param>: <config value>,
         }
        }

    ``<config param>`` must match one of the ``DEFAULT_`` attributes on :class:`.DistinguishedName`. The ``DEFAULT_``
    prefix is optional and dict keys are case-insensitive. Any parameters not specified will keep the hard-coded
    default.

    :param dict global_config_dict: See above.
    :rtype: None
    :raises KeyError: if the dict is incorrectly formatted or contains unknown config parameters
    """
    bad = []
    for key, val in global_config_dict['global'].items():
        orig_key = key
        key = normalize_global_config_param(key)
        if hasattr(DistinguishedName, key):
            val = _global_mappers.get(key, _default_mapper)(val)
            setattr(DistinguishedName, key, val)
        else:
            bad.append(orig_key)
    if bad:
        raise KeyError('Unknown global config keys: {0}'.format(', '.join(bad)))


def load_file(path, file_decoder=None):
    """Load a config file. Must decode to a dict with the sections described on other methods. A YAML example::

        global:
          TYPE_CASE_SENSITIVE: false
          VALUE_CASE_SENSITIVE: true
          STRICT: true

    :param path: A path to a config file. Provides support for YAML and JSON format, or you can specify your own decoder
                 that returns a dict.
    :param file_decoder: A callable returning a dict when passed a file-like object
    :rtype: None
    :raises RuntimeError: if an unsupported file extension was given without the ``file_decoder`` argument.
    """
    if file_decoder is None:
        if path.endswith('.yml') or path.endswith('.yaml'):
            file_decoder = yaml.safe_load
        elif path.endswith('.json'):
            file_decoder = json.load
        else:
            raise RuntimeError('Unsupported file type, must be YAML or JSON, or specify file_decoder argument')
    with open(path) as f:
        config_dict = file_decoder(f)
    load_config_dict(config_dict)


def load_config_dict(config_dict):
    """Load config parameters from a dictionary. Must be formatted in the same was as ``load_file``

    :param dict config_dict: The config dictionary. See format in ``load_file``.
    :rtype: None
    """
    if 'global' in config_dict:
        set_global_config(config_dict)
