from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional

PLACEHOLDER_IMAGE = "/assets/placeholder.jpg"


@dataclass(frozen=True)
class Cta:
    text: str
    link: str


@dataclass(frozen=True)
class CarouselSlide:
    image: str
    alt: str
    title: str = ""
    subtitle: str = ""
    description: str = ""
    cta: Optional[Cta] = None


def _state_slide(slug, name, subtitle, description, image, verb="Explore"):
    return CarouselSlide(
        image=image,
        alt=f"{name} - {subtitle}",
        title=name,
        subtitle=subtitle,
        description=description,
        cta=Cta(f"{verb} {name}", f"state.html?slug={slug}"),
    )


DEFAULT_HERO_SLIDES = [
    _state_slide("assam", "Assam", "The Gateway to Northeast India",
                 "Home to the mighty Brahmaputra, world-famous tea gardens, and the one-horned rhinoceros",
                 "/assets/states/assam-hero.jpg"),
    _state_slide("arunachal-pradesh", "Arunachal Pradesh", "Land of the Dawn-Lit Mountains",
                 "India's easternmost state with pristine valleys, Buddhist monasteries, and diverse tribes",
                 "/assets/states/arunachal-pradesh-hero.jpg", verb="Discover"),
    _state_slide("meghalaya", "Meghalaya", "The Abode of Clouds",
                 "Living root bridges, Asia's cleanest village, and the wettest place on Earth",
                 "/assets/states/meghalaya-hero.jpg", verb="Visit"),
    _state_slide("manipur", "Manipur", "The Jewel of India",
                 "Land of the graceful Manipuri dance, floating Loktak Lake, and the Sangai deer",
                 "/assets/states/manipur-hero.jpg"),
    _state_slide("mizoram", "Mizoram", "Land of the Hill People",
                 "Bamboo forests, vibrant Mizo culture, and the highest literacy rate in India",
                 "/assets/states/mizoram-hero.jpg", verb="Discover"),
    _state_slide("nagaland", "Nagaland", "Land of Festivals",
                 "Home to 16 major tribes, the Hornbill Festival, and rich warrior traditions",
                 "/assets/states/nagaland-hero.jpg", verb="Visit"),
    _state_slide("sikkim", "Sikkim", "Small but Beautiful",
                 "Gateway to Kanchenjunga, Buddhist monasteries, and India's first organic state",
                 "/assets/states/sikkim-hero.jpg"),
    _state_slide("tripura", "Tripura", "Land of Eternal Beauty",
                 "Ancient palaces, rock carvings, tribal heritage, and the Tripura Sundari Temple",
                 "/assets/states/tripura-hero.jpg", verb="Discover"),
]


def hero_slides(states: Iterable[Mapping]) -> List[CarouselSlide]:
    """One slide per state that has a featured image; defaults when none do."""
    slides = []
    for state in states:
        images = state.get("featuredImages") or []
        if not images:
            continue
        name = state.get("name", "")
        subtitle = state.get("tagline", "")
        slides.append(CarouselSlide(
            image=images[0],
            alt=f"{name} - {subtitle}" if subtitle else name,
            title=name,
            subtitle=subtitle,
            description=state.get("description", ""),
            cta=Cta(f"Explore {name}", f"state.html?slug={state.get('slug', '')}"),
        ))
    return slides or list(DEFAULT_HERO_SLIDES)


def featured_slides(document: Mapping) -> List[CarouselSlide]:
    """Untitled slides from a state's or city's featured images."""
    name = document.get("name", "")
    images = document.get("featuredImages") or [PLACEHOLDER_IMAGE]
    return [
        CarouselSlide(image=image, alt=f"{name} - Image {i + 1}")
        for i, image in enumerate(images)
    ]


def placeholder_gallery(city_name: str) -> List[dict]:
    return [
        {"url": "/assets/gallery-1.jpg", "caption": f"Beautiful views of {city_name}"},
        {"url": "/assets/gallery-2.jpg", "caption": "Local culture and traditions"},
        {"url": "/assets/gallery-3.jpg", "caption": "Tourist attractions"},
    ]


def visible_gallery(city: Mapping) -> List[dict]:
    """Gallery images a visitor sees.

    Only moderated images are shown; if none are moderated yet the whole
    gallery is shown, and an empty gallery falls back to placeholders.
    Images without a `moderated` flag count as moderated.
    """
    images = list(city.get("gallery") or [])
    moderated = [img for img in images if img.get("moderated") is not False]
    if moderated:
        return moderated
    return images or placeholder_gallery(city.get("name", ""))
