# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Unit tests for propdiff components.

Each test builds its own scanner and registry through fixtures and never relies
on the process-wide defaults.
"""
