"""
Simulation core for Pickleball Pong: entities, input mapping, particles and the tick engine.
"""
