"""
Lettersmith - Cover letter composition and field placement

Assembles a tailored cover letter from a resume and a job posting, and places
named field values at exact caret positions inside an editable document.

Architecture:
- Intake Context: Resume and job posting text acquisition and normalization
- Targeting Context: Term frequency scoring and resume/job vocabulary matching
- Templating Context: Cover letter composition from matched terms
- Editing Context: Document model, caret resolution, and field markers
- Rendering Context: Reference layout geometry and raw/clean export
"""

__version__ = "0.1.0"
