"""Administrative tools for the job board: staff account management and data seeding."""

__version__ = "1.0.0"
