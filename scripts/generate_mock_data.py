import csv
import os
import random

CITIES = ["Jerusalem", "Tel-Aviv", "Beer-Sheva", "Haifa", "Eilat"]

RESTAURANTS = [
    ("meat", "Jerusalem", "All meat restaurant"),
    ("vegan", "Haifa", "Only vegan"),
    ("cafe", "Tel-Aviv", "Coffee shop"),
    ("chinese", "Haifa", "chinese restaurant"),
    ("mexican", "Tel-Aviv", "mexican restaurant"),
    ("buffet", "Eilat", "buffet restaurant"),
]

# Eilat deliberately gets no drivers
DRIVER_CITIES = ["Jerusalem", "Tel-Aviv", "Beer-Sheva", "Haifa"]


def _write(path, header, rows):
    with open(path, mode='w', newline='') as file:
        writer = csv.writer(file)
        writer.writerow(header)
        writer.writerows(rows)


def generate_mock_data(directory="sampledata", customers=20, drivers=14):
    os.makedirs(directory, exist_ok=True)

    _write(os.path.join(directory, "cities.csv"), ["name"], [[city] for city in CITIES])
    _write(os.path.join(directory, "restaurants.csv"), ["name", "city", "description"], RESTAURANTS)

    customer_rows = []
    for i in range(customers):
        city = random.choice(CITIES)
        customer_rows.append([f"CUS-{str(i+1).zfill(3)}", city, f"{random.randint(1, 200)} Main St, {city}"])
    _write(os.path.join(directory, "customers.csv"), ["name", "city", "address"], customer_rows)

    driver_rows = []
    for i in range(drivers):
        driver_rows.append([f"DRV-{str(i+1).zfill(3)}", random.choice(DRIVER_CITIES)])
    _write(os.path.join(directory, "drivers.csv"), ["name", "city"], driver_rows)

    print(f"Successfully generated {customers} customers and {drivers} drivers into '{directory}'.")


if __name__ == "__main__":
    generate_mock_data()
