"""dialtimer: a circular countdown dial with drag-to-set time."""

__version__ = "0.1.0"
