from sys import exit

from . import CLI


exit(CLI().run())
