# src/pycodon_frames/__init__.py

# Copyright (c) 2025 Gabriel Falque
# Distributed under the terms of the MIT License.
# (See accompanying file LICENSE or copy at https://opensource.org/license/mit/)

# This file makes Python treat the directory as a package.

__version__ = "0.1.0"
