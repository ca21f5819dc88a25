"""tokenscope — random token data generator and token-type analyzer."""

__version__ = "0.1.0"
