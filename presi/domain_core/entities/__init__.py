from .presentation import PresentationContent, Slide, SlideElement

__all__ = ["PresentationContent", "Slide", "SlideElement"]
