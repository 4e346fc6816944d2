"""
Question bank access — loading the default bank and filtering it.

Modules:
  bank — load_question_bank() + domain/section/id lookup helpers.
"""
