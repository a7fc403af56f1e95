"""
recruit_export – candidate export subsystem.

Import path convention::

    from recruit_export.kernel.errors import DomainError
    from recruit_export.application.export import ExportService, ExportStore
    from recruit_export.config import ExportSettings
    from recruit_export.domain.candidates import CandidateExporter
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
