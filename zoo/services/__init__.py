from . import animal, auth
