"""cvterm -- a simulated terminal serving views of a CV.

Short text commands (``info``, ``work``, ``skills``...) are resolved by a
dispatcher to formatted, width-constrained text views of a single CV
document fetched from a remote JSON endpoint and held in a time-bounded
cache with stale-on-error fallback.
"""

__version__ = "0.1.0"
