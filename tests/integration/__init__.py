# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Integration tests for propdiff.

End-to-end comparison scenarios through the public API.
"""
