"""Components layer - the tuple family and its construction helpers.

Components are leaf modules that:
- Do NOT import services
- May import from: helpers, other components

Architecture:
- helpers/ = stdlib-only utilities (pure, stateless)
- components/ = domain building blocks (this layer)
- services/ = configuration and other long-lived state
"""
