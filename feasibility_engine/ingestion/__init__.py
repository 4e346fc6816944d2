"""
Ingestion layer — reading recorded questionnaire answers from disk.

Submodules:
  response_file — JSON / CSV response file readers producing ``Response`` objects.
"""
