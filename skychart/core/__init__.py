"""Core types, constants, exceptions and settings for SkyChart.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""
