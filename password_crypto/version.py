"""Password Crypto Meta information.
   Password Crypto protects stored secrets with a single master password.
"""
__title__ = 'password_crypto'
__description__ = (
   'Password-based AES-GCM encryption of secrets at rest, '
   'derived from a single master password.'
)
__version__ = '1.0.0'
__copyright__ = 'Copyright (c) 2025 Bonitasoft'
__author__ = 'Bonitasoft'
__license__ = 'Apache-2.0'
