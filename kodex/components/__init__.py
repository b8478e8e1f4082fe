"""Components layer - domain building blocks.

Components are leaf modules that:
- Do NOT import services, workflows, or interfaces
- ARE imported and used BY workflows and commands
- May import from: helpers, other components

Architecture:
- helpers/ = stdlib-only utilities, DTOs and exceptions
- components/ = component store, taxonomy index, output generator (this layer)
- workflows/ = selection flow and command orchestration
- services/ = configuration
- interfaces/ = CLI presentation
"""
