import functools
import pathlib

import elements
import ruamel.yaml as yaml

folder = pathlib.Path(__file__).parent

KEY_ORDERS = ('str', 'native')


@functools.lru_cache(maxsize=None)
def configs():
  text = elements.Path(folder / 'configs.yaml').read()
  return yaml.YAML(typ='safe').load(text)


def load(*names, **overrides):
  """Return the default config updated by named blocks and keyword overrides.

  Overrides that are None are skipped so callers can forward optional
  arguments unchanged. Unknown keys raise a KeyError.
  """
  blocks = configs()
  config = elements.Config(blocks['defaults'])
  for name in names:
    config = config.update(blocks[name])
  overrides = {k: v for k, v in overrides.items() if v is not None}
  if overrides:
    config = config.update(overrides)
  check(config)
  return config


def check(config):
  assert config.default_weight > 0, config.default_weight
  assert config.bisect_border >= 0, config.bisect_border
  assert config.key_order in KEY_ORDERS, config.key_order
