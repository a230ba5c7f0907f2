"""
Validator engine core: models, validators and rules.
"""
