"""
Fixed catalogs used to validate business search criteria.

These mirror the enumerations documented for the Yelp Fusion
``/businesses/search`` endpoint. They are read-only constants; bump
``CATALOG_VERSION`` whenever a set changes.

Reference: https://docs.developer.yelp.com/reference/v3_business_search
"""

from typing import FrozenSet, Tuple

CATALOG_VERSION = "2024.1"

# ---------------------------------------------------------------------------
# Sort orders and price tiers
# The first sort order is the default.
# ---------------------------------------------------------------------------
SORT_ORDERS: Tuple[str, ...] = ("best_match", "rating", "review_count", "distance")

PRICE_TIERS: FrozenSet[int] = frozenset({1, 2, 3, 4})

# ---------------------------------------------------------------------------
# Locales
# ---------------------------------------------------------------------------
SUPPORTED_LOCALES: FrozenSet[str] = frozenset(
    {
        "cs_CZ",
        "da_DK",
        "de_AT",
        "de_CH",
        "de_DE",
        "en_AU",
        "en_BE",
        "en_CA",
        "en_CH",
        "en_GB",
        "en_HK",
        "en_IE",
        "en_MY",
        "en_NZ",
        "en_PH",
        "en_SG",
        "en_US",
        "es_AR",
        "es_CL",
        "es_ES",
        "es_MX",
        "fi_FI",
        "fil_PH",
        "fr_BE",
        "fr_CA",
        "fr_CH",
        "fr_FR",
        "it_CH",
        "it_IT",
        "ja_JP",
        "ms_MY",
        "nb_NO",
        "nl_BE",
        "nl_NL",
        "pl_PL",
        "pt_BR",
        "pt_PT",
        "sv_FI",
        "sv_SE",
        "tr_TR",
        "zh_HK",
        "zh_TW",
    }
)

DEFAULT_LOCALE = "en_US"

# ---------------------------------------------------------------------------
# Business attributes
# ---------------------------------------------------------------------------
SUPPORTED_BUSINESS_ATTRIBUTES: FrozenSet[str] = frozenset(
    {
        "hot_and_new",
        "request_a_quote",
        "reservation",
        "waitlist_reservation",
        "deals",
        "gender_neutral_restrooms",
        "open_to_all",
        "wheelchair_accessible",
        "liked_by_vegetarians",
        "outdoor_seating",
        "parking_garage",
        "parking_lot",
        "parking_street",
        "parking_valet",
        "parking_validated",
        "wifi_free",
        "wifi_paid",
    }
)

# ---------------------------------------------------------------------------
# Category aliases, grouped by their top-level parent category.
# ---------------------------------------------------------------------------
_TOP_LEVEL = {
    "active",
    "arts",
    "auto",
    "beautysvc",
    "bicycles",
    "education",
    "eventservices",
    "financialservices",
    "food",
    "health",
    "homeservices",
    "hotelstravel",
    "localflavor",
    "localservices",
    "massmedia",
    "nightlife",
    "pets",
    "professional",
    "publicservicesgovt",
    "religiousorgs",
    "restaurants",
    "shopping",
}

_RESTAURANTS = {
    "afghani", "african", "senegalese", "southafrican", "newamerican",
    "tradamerican", "arabian", "argentine", "armenian", "asianfusion",
    "australian", "austrian", "bangladeshi", "bbq", "basque", "belgian",
    "brasseries", "brazilian", "breakfast_brunch", "british", "buffets",
    "bulgarian", "burgers", "burmese", "cafes", "cafeteria", "cajun",
    "cambodian", "caribbean", "dominican", "haitian", "puertorican",
    "trinidadian", "catalan", "cheesesteaks", "chicken_wings", "chickenshop",
    "chinese", "cantonese", "dimsum", "hainan", "shanghainese", "szechuan",
    "comfortfood", "creperies", "cuban", "czech", "delis", "diners",
    "dinnertheater", "eritrean", "ethiopian", "hotdogs", "filipino",
    "fishnchips", "fondue", "food_court", "foodstands", "french", "gamemeat",
    "gastropubs", "georgian", "german", "gluten_free", "greek", "guamanian",
    "halal", "hawaiian", "himalayan", "honduran", "hkcafe", "hotpot",
    "hungarian", "iberian", "indpak", "indonesian", "international", "irish",
    "italian", "calabrian", "sardinian", "sicilian", "tuscan", "japanese",
    "conveyorsushi", "izakaya", "japacurry", "ramen", "teppanyaki", "kebab",
    "korean", "kosher", "laotian", "latin", "colombian", "salvadoran",
    "venezuelan", "raw_food", "malaysian", "mediterranean", "falafel",
    "mexican", "tacos", "mideastern", "egyptian", "lebanese",
    "modern_european", "mongolian", "moroccan", "newmexican", "nicaraguan",
    "noodles", "pakistani", "panasian", "persian", "peruvian", "pizza",
    "polish", "polynesian", "popuprestaurants", "portuguese", "poutineries",
    "russian", "salad", "sandwiches", "scandinavian", "scottish", "seafood",
    "singaporean", "slovakian", "somali", "soulfood", "soup", "southern",
    "spanish", "srilankan", "steak", "supperclubs", "sushi", "syrian",
    "taiwanese", "tapas", "tapasmallplates", "tex-mex", "thai", "turkish",
    "ukrainian", "uzbek", "vegan", "vegetarian", "vietnamese", "waffles",
    "wraps",
}

_FOOD = {
    "acaibowls", "bagels", "bakeries", "beer_and_wine", "breweries",
    "bubbletea", "butcher", "cakeshop", "cheese", "chocolate", "coffee",
    "coffeeroasteries", "convenience", "cupcakes", "desserts", "distilleries",
    "donuts", "ethnicmarkets", "farmersmarket", "fooddeliveryservices",
    "foodtrucks", "gelato", "gourmet", "grocery", "icecream", "importedfood",
    "internetcafe", "juicelounges", "kombucha", "milkshakebars",
    "organic_stores", "pretzels", "shavedice", "smokehouse", "streetvendors",
    "tea", "wineries",
}

_NIGHTLIFE = {
    "bars", "beerbar", "beergardens", "champagne_bars", "cocktailbars",
    "comedyclubs", "danceclubs", "divebars", "gaybars", "hookah_bars",
    "irish_pubs", "jazzandblues", "karaoke", "lounges", "musicvenues",
    "pianobars", "poolhalls", "pubs", "speakeasies", "sportsbars",
    "tikibars", "whiskeybars", "wine_bars",
}

_ACTIVE = {
    "amusementparks", "aquariums", "beaches", "bikerentals", "boating",
    "bowling", "boxing", "climbing", "dancestudio", "dog_parks",
    "escapegames", "fitness", "gokarts", "golf", "gyms", "hiking",
    "horsebackriding", "lasertag", "martialarts", "mini_golf",
    "paddleboarding", "paintball", "parks", "pilates", "playgrounds",
    "recreation", "skatingrinks", "skiresorts", "sports_clubs", "surfing",
    "swimmingpools", "tennis", "trampoline", "yoga", "zoos",
}

_ARTS = {
    "arcades", "artmuseums", "botanicalgardens", "casinos", "culturalcenter",
    "festivals", "galleries", "movietheaters", "museums", "opera",
    "planetarium", "social_clubs", "stadiumsarenas", "theater",
}

_BEAUTY = {
    "barbers", "eyelashservice", "hair", "hair_removal", "hairstylists",
    "makeupartists", "massage", "nail_salons", "othersalons", "piercing",
    "skincare", "spas", "tanning", "tattoo", "waxing",
}

_SHOPPING = {
    "antiques", "artsandcrafts", "bookstores", "bridal", "childcloth",
    "computers", "cosmetics", "deptstores", "discountstore", "drugstores",
    "electronics", "eyewear", "fashion", "florists", "flowers", "furniture",
    "giftshops", "guns_and_ammo", "hardware", "homeandgarden", "jewelry",
    "lingerie", "luggage", "menscloth", "mobilephones",
    "musicalinstrumentsandteachers", "outlet_stores", "petstore", "shoes",
    "shoppingcenters", "sportgoods", "thrift_stores", "tobaccoshops", "toys",
    "vapeshops", "videogamestores", "vintage", "watches", "wholesale_stores",
    "womenscloth",
}

_HEALTH = {
    "acupuncture", "chiropractors", "counseling", "dentists", "dermatology",
    "doctors", "familydr", "hospitals", "medcenters", "optometrists",
    "pediatricians", "pharmacy", "physicaltherapy", "urgent_care",
}

_AUTO = {
    "autopartssupplies", "autorepair", "bodyshops", "car_dealers", "carwash",
    "motorcycledealers", "oilchange", "parking", "servicestations", "tires",
    "towing",
}

_HOTELS_TRAVEL = {
    "airports", "bedbreakfast", "busstations", "campgrounds", "carrental",
    "hostels", "hotels", "resorts", "rvparks", "taxis", "tours",
    "trainstations", "travelservices", "vacation_rentals",
}

_HOME_SERVICES = {
    "apartments", "carpet_cleaning", "contractors", "electricians",
    "gardeners", "handyman", "homecleaning", "hvac", "interiordesign",
    "landscaping", "locksmiths", "movers", "painters", "pest_control",
    "plumbing", "realestate", "roofing", "windowwashing",
}

_LOCAL_SERVICES = {
    "bike_repair_maintenance", "childcare", "couriers", "drycleaninglaundry",
    "itservices", "jewelryrepair", "laundromat", "notaries",
    "printingservices", "selfstorage", "sewingalterations", "shoerepair",
    "watch_repair",
}

_PETS = {
    "animalshelters", "dogwalkers", "groomer", "pet_sitting", "petboarding",
    "pettraining", "vet",
}

_PROFESSIONAL = {
    "accountants", "advertising", "architects", "employmentagencies",
    "graphicdesign", "lawyers", "marketing", "photographers",
    "talentagencies", "videographers", "web_design",
}

_FINANCIAL = {
    "banks", "currencyexchange", "financialadvising", "insurance",
    "paydayloans", "taxservices",
}

_EDUCATION = {
    "artschools", "collegeuniv", "cookingschools", "driving_schools",
    "elementaryschools", "highschools", "language_schools", "preschools",
    "specialtyschools", "tutoring",
}

_EVENT_SERVICES = {
    "caterers", "djs", "eventplanning", "officiants", "partysupplies",
    "venues", "weddingplanning",
}

_PUBLIC_SERVICES = {
    "civiccenter", "communitycenters", "courthouses", "embassy",
    "firedepartments", "landmarks", "libraries", "police", "postoffices",
    "townhall",
}

_RELIGIOUS = {
    "buddhist_temples", "churches", "hindu_temples", "mosques", "synagogues",
}

_MASS_MEDIA = {"printmedia", "radiostations", "televisionstations"}

SUPPORTED_CATEGORY_ALIASES: FrozenSet[str] = frozenset().union(
    _TOP_LEVEL,
    _RESTAURANTS,
    _FOOD,
    _NIGHTLIFE,
    _ACTIVE,
    _ARTS,
    _BEAUTY,
    _SHOPPING,
    _HEALTH,
    _AUTO,
    _HOTELS_TRAVEL,
    _HOME_SERVICES,
    _LOCAL_SERVICES,
    _PETS,
    _PROFESSIONAL,
    _FINANCIAL,
    _EDUCATION,
    _EVENT_SERVICES,
    _PUBLIC_SERVICES,
    _RELIGIOUS,
    _MASS_MEDIA,
)
