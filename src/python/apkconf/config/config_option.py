# coding=utf-8
# Copyright 2015 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).


class ConfigOption(object):
  """Registry of apkconf.ini options.

  Options are created in code, typically scoped as close to their use as possible. ::

     key_properties = ConfigOption.create(
       section='android-signing',
       option='key_properties',
       help='Path, relative to the build root, of the release signing properties file.',
       default='key.properties')

  Read an option from ``apkconf.ini`` with ::

     path = config.get_option(key_properties)

  `configparser <https://docs.python.org/3/library/configparser.html>`_ is used to retrieve
  options, so variable interpolation and the default section behave as defined in its docs.
  """

  class Option(object):
    """An ``apkconf.ini`` option."""
    def __init__(self, section, option, help, valtype, default):
      """Do not instantiate directly - use ConfigOption.create."""
      self.section = section
      self.option = option
      self.help = help
      self.valtype = valtype
      self.default = default

    def __hash__(self):
      return hash(self.section + self.option)

    def __eq__(self, other):
      if not isinstance(other, ConfigOption.Option):
        return False
      return self.section == other.section and self.option == other.option

    def __repr__(self):
      return '{0}({1}.{2})'.format(self.__class__.__name__, self.section, self.option)

  _CONFIG_OPTIONS = set()

  @classmethod
  def create(cls, section, option, help, valtype=str, default=None):
    """Create a new ``apkconf.ini`` option.

    :param section: Name of section to retrieve option from.
    :param option: Name of option to retrieve from section.
    :param help: Description for display in the configuration reference.
    :param valtype: Type to cast the retrieved option to.
    :param default: Default value if undefined in the config.
    :returns: An ``Option`` suitable for use with ``Config.get_option``.
    :raises: ``ValueError`` if the option already exists.
    """
    new_opt = cls.Option(section=section,
                         option=option,
                         help=help,
                         valtype=valtype,
                         default=default)
    if new_opt in cls._CONFIG_OPTIONS:
      raise ValueError('Option {0}.{1} already exists.'.format(new_opt.section, new_opt.option))
    cls._CONFIG_OPTIONS.add(new_opt)
    return new_opt
