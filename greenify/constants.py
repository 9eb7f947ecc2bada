# каталог магазина: порядок важен, категории выводятся в порядке первого появления
PRODUCTS = [
    {
        "id": "monstera",
        "name": "Monstera Deliciosa",
        "price": 24.99,
        "category": "Pflegeleicht",
    },
    {
        "id": "ficus",
        "name": "Ficus Elastica",
        "price": 29.99,
        "category": "Luftreiniger",
    },
    {
        "id": "snake",
        "name": "Sansevieria (Bogenhanf)",
        "price": 19.99,
        "category": "Pflegeleicht",
    },
    {
        "id": "calathea",
        "name": "Calathea Orbifolia",
        "price": 34.99,
        "category": "Schattentolerant",
    },
    {
        "id": "pothos",
        "name": "Epipremnum (Efeutute)",
        "price": 14.99,
        "category": "Hängepflanzen",
    },
    {
        "id": "zz",
        "name": "Zamioculcas Zamiifolia",
        "price": 22.99,
        "category": "Schattentolerant",
    },
]

CHECKOUT_NOTICE = "Checkout kommt bald!"
