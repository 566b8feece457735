# Copyright 2026 TypeGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""TypeGraph: an in-memory model of object-oriented type structure."""

__version__ = "0.1.0"
