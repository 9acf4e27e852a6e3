"""CRM Forms: field and form validation for the jewelry CRM dashboard."""

__version__ = "1.0.0"
