from .greetings import GreetingsList, build_greeting_card
from .onboarding import build_onboarding_screen

__all__ = ["GreetingsList", "build_greeting_card", "build_onboarding_screen"]
