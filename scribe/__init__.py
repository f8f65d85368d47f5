"""
SCRIBE - Screening Compatibility & Reconciled Inventory of Benchmarked Expertise

Resume screening estimates and skill-profile reconciliation for job seekers.

Architecture:
- Taxonomy Context: Read-only keyword, alias, and role tables shared by both engines
- Screening Context: ATS compatibility scoring of a structured resume
- Assessment Context: Reconciliation of skill signals into a ranked skill profile
"""

__version__ = "0.1.0"
