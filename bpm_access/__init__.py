"""bpm-access: tenant-scoped roles, permissions and module access resolution."""

__version__ = "1.0.0"
