from slideshow.slides import (
    DEFAULT_HERO_SLIDES,
    CarouselSlide,
    Cta,
    featured_slides,
    hero_slides,
    visible_gallery,
)


class TestVisibleGallery:
    def test_shows_only_moderated_images(self):
        city = {"name": "Guwahati", "gallery": [
            {"id": "1", "moderated": True},
            {"id": "2", "moderated": False},
            {"id": "3", "moderated": True},
        ]}

        assert [img["id"] for img in visible_gallery(city)] == ["1", "3"]

    def test_shows_everything_when_nothing_is_moderated(self):
        city = {"gallery": [{"id": "1", "moderated": False}, {"id": "2", "moderated": False}]}

        assert len(visible_gallery(city)) == 2

    def test_missing_flag_counts_as_moderated(self):
        city = {"gallery": [{"id": "1"}, {"id": "2", "moderated": False}]}

        assert [img["id"] for img in visible_gallery(city)] == ["1"]

    def test_empty_gallery_falls_back_to_placeholders(self):
        gallery = visible_gallery({"name": "Kohima", "gallery": []})

        assert len(gallery) == 3
        assert gallery[0]["caption"] == "Beautiful views of Kohima"


class TestSlides:
    def test_hero_slides_from_states(self):
        states = [
            {"slug": "sikkim", "name": "Sikkim", "tagline": "Small but Beautiful",
             "description": "Mountains", "featuredImages": ["/s1.jpg", "/s2.jpg"]},
            {"slug": "tripura", "name": "Tripura", "featuredImages": []},
        ]

        slides = hero_slides(states)

        assert slides == [CarouselSlide(
            image="/s1.jpg",
            alt="Sikkim - Small but Beautiful",
            title="Sikkim",
            subtitle="Small but Beautiful",
            description="Mountains",
            cta=Cta("Explore Sikkim", "state.html?slug=sikkim"),
        )]

    def test_hero_slides_default_to_all_eight_states(self):
        slides = hero_slides([])

        assert slides == DEFAULT_HERO_SLIDES
        assert len(slides) == 8

    def test_featured_slides(self):
        slides = featured_slides({"name": "Aizawl", "featuredImages": ["/a.jpg", "/b.jpg"]})

        assert [s.alt for s in slides] == ["Aizawl - Image 1", "Aizawl - Image 2"]
        assert all(s.title == "" and s.cta is None for s in slides)

    def test_featured_slides_placeholder(self):
        slides = featured_slides({"name": "Aizawl"})

        assert [s.image for s in slides] == ["/assets/placeholder.jpg"]
