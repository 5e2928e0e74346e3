"""Component scaffolding for react-scaffold.

This module provides the template library and the engine that writes a
generated unit to disk. Supported units:

- Components (CSS, styled-components or Emotion, optional test)
- Zustand stores
- Context API modules (reducer, provider, hook, action creators)
"""

from react_scaffold.scaffolding.generator import GenerationResult, generate_entity
from react_scaffold.scaffolding.templates import PlannedFile, entity_files, render_template

__all__ = ["GenerationResult", "PlannedFile", "entity_files", "generate_entity", "render_template"]
