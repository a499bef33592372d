"""
larvasim: soft-bodied larva locomotion simulator

A five-point chain whose segment lengths are driven toward time-varying
targets, producing peristaltic crawling.

Core concepts:
- Natural lengths are fixed at creation; target lengths follow a gait
- A single-step spring relaxation turns length errors into velocities
- Propulsion terms bias the head so oscillation becomes translation
- Damped explicit integration keeps every tick stable
"""

__version__ = "0.1.0"
