"""
Registry bounded context: domain layer.

Beneficiaries enrolled in social programs and the reference table
of identity-document types.
"""
