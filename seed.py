import argparse

from content.store import CITIES, STATES, ContentStore
from settings import get_settings

# (slug, name, tagline, lat, lng, [(city slug, city name, lat, lng, summary)])
NORTHEAST = [
    ("assam", "Assam", "The Gateway to Northeast India", 26.20, 92.94, [
        ("guwahati", "Guwahati", 26.14, 91.74, "Gateway city on the Brahmaputra, home to Kamakhya Temple."),
        ("jorhat", "Jorhat", 26.75, 94.20, "Tea capital of the world and the road to Majuli island."),
    ]),
    ("arunachal-pradesh", "Arunachal Pradesh", "Land of the Dawn-Lit Mountains", 28.22, 94.73, [
        ("itanagar", "Itanagar", 27.08, 93.61, "Capital town with Ita Fort and Ganga Lake."),
        ("tawang", "Tawang", 27.59, 91.86, "High-altitude town around the 400-year-old Tawang Monastery."),
    ]),
    ("meghalaya", "Meghalaya", "The Abode of Clouds", 25.47, 91.37, [
        ("shillong", "Shillong", 25.58, 91.89, "Hill capital of waterfalls, pine forests and music."),
        ("cherrapunji", "Cherrapunji", 25.30, 91.70, "Among the wettest places on Earth, with living root bridges."),
    ]),
    ("manipur", "Manipur", "The Jewel of India", 24.66, 93.91, [
        ("imphal", "Imphal", 24.82, 93.94, "Capital with Kangla Fort and the all-women Ima Market."),
        ("moirang", "Moirang", 24.50, 93.77, "Lakeside town by Loktak Lake and its floating phumdis."),
    ]),
    ("mizoram", "Mizoram", "Land of the Hill People", 23.16, 92.94, [
        ("aizawl", "Aizawl", 23.73, 92.72, "Ridge-top capital overlooking the Tlawng river valley."),
        ("lunglei", "Lunglei", 22.88, 92.73, "Southern hill town named after a rock bridge."),
    ]),
    ("nagaland", "Nagaland", "Land of Festivals", 26.16, 94.56, [
        ("kohima", "Kohima", 25.67, 94.11, "Capital and host of the Hornbill Festival."),
        ("dimapur", "Dimapur", 25.91, 93.73, "Commercial hub with the ruins of the Kachari kingdom."),
    ]),
    ("sikkim", "Sikkim", "Small but Beautiful", 27.53, 88.51, [
        ("gangtok", "Gangtok", 27.33, 88.61, "Capital with monasteries and views of Kanchenjunga."),
        ("pelling", "Pelling", 27.30, 88.24, "Quiet town facing the Kanchenjunga range."),
    ]),
    ("tripura", "Tripura", "Land of Eternal Beauty", 23.94, 91.99, [
        ("agartala", "Agartala", 23.83, 91.29, "Capital around the white Ujjayanta Palace."),
        ("udaipur-tripura", "Udaipur", 23.53, 91.48, "Temple town of the Tripura Sundari shrine."),
    ]),
]


def build_records():
    states, cities = [], []
    for index, (slug, name, tagline, lat, lng, state_cities) in enumerate(NORTHEAST, start=1):
        states.append({
            "id": index,
            "slug": slug,
            "name": name,
            "tagline": tagline,
            "description": f"{name}, {tagline.lower()}.",
            "history": "",
            "highlights": [c[1] for c in state_cities],
            "festivals": [],
            "coords": {"lat": lat, "lng": lng},
            "featuredImages": [f"/assets/states/{slug}-hero.jpg"],
            "cities": [c[0] for c in state_cities],
        })
        for city_slug, city_name, city_lat, city_lng, summary in state_cities:
            cities.append({
                "id": len(cities) + 1,
                "slug": city_slug,
                "name": city_name,
                "stateSlug": slug,
                "summary": summary,
                "history": "",
                "localSpecialties": [],
                "explore": [],
                "coords": {"lat": city_lat, "lng": city_lng},
                "featuredImages": [],
                "gallery": [],
            })
    return states, cities


def seed(store: ContentStore, force: bool = False) -> bool:
    store.init_files()
    if not force and (store.list_states() or store.list_cities()):
        return False
    states, cities = build_records()
    store.save(STATES, states)
    store.save(CITIES, cities)
    return True


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Write the sample NorthEast data set")
    parser.add_argument("--force", action="store_true", help="overwrite existing states and cities")
    args = parser.parse_args()

    store = ContentStore(get_settings().data_dir)
    if seed(store, force=args.force):
        print(f"Seeded {len(NORTHEAST)} states into {store.data_dir}")
    else:
        print("Data already present, nothing written (use --force to overwrite)")
