from wordstats.version import __version__
