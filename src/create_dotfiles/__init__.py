"""Back up and restore dotfiles listed in ~/.dotfilesrc.toml."""

__version__ = "1.0.0"
