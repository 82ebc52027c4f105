from ._yaml import dump_yaml, load_yaml
from .vectors import dump_vectors, load_vectors
