# fedora-postinstall/fedora_postinstall/stages/__init__.py

from . import system_update
from . import repositories
from . import base_packages
from . import package_batches
from . import fonts
from . import desktop_tweaks
