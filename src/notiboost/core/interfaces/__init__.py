"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite invertir dependencias: los wrappers dependen de abstracciones.
"""

from notiboost.core.interfaces.dispatcher import Dispatcher

__all__ = ["Dispatcher"]
