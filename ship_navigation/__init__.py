"""
Ship Navigation Simulator

Core modules:
- instructions: line parser and instruction types
- rotation: quarter-turn rotation of integer vectors
- engine: heading and waypoint plotting rules
- models: ship state
- trace: helpers for producing human-readable step traces (no behavior changes)
"""
