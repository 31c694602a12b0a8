"""Test package for MentaliTTY.

Core tests drive the state machine directly with scripted direction sources
and fake timestamps. The pygame smoke tests run headlessly using SDL's dummy
video driver. Run ``pytest`` from the project root.
"""
