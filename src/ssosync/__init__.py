# Copyright (c) 2025 Mahmood Khordoo
#
# This software is licensed under the MIT License.
# See the LICENSE file in the root directory for details.

"""
SSOSYNC - AWS SSO profile generator.

A Python CLI tool that reads the cached AWS SSO token, lists every account
and permission set the user can reach, and writes (or removes) matching
profiles in the AWS config file.
"""

__version__ = "0.1.0"
