# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
propdiff test suite.

Organized into unit tests (one package per propdiff subpackage) and
integration tests exercising complete comparison scenarios.
"""
