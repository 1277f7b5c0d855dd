import logging
import os
from datetime import datetime

from dotenv import load_dotenv

from dispatch import Dispatcher, DispatchError
from reports import get_driver_rank_report, get_driver_rank_report_by_city, rank_report_to_frame
from store import load_store_from_csv


def run_rank_report(sampledata_dir="sampledata"):
    load_dotenv()
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"))

    print("=== STARTING ORDER ASSIGNMENT RUN ===")

    # 1. Load Data
    base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    store = load_store_from_csv(os.path.join(base_dir, sampledata_dir))
    print(
        f"Loaded {len(store.find_all_cities())} Cities, {len(store.find_all_customers())} Customers, "
        f"{len(store.find_all_restaurants())} Restaurants and {len(store.find_all_drivers())} Drivers.\n"
    )

    dispatcher = Dispatcher(store)

    # 2. Every customer orders from every restaurant of their city, all in the same time slot
    delivery_time = datetime.now().replace(second=0, microsecond=0)
    assigned = 0
    rejected = 0

    for customer in store.find_all_customers():
        for restaurant in store.find_all_restaurants():
            if restaurant.city.name != customer.city.name:
                continue
            try:
                delivery = dispatcher.create_order_and_assign_driver(customer, restaurant, delivery_time)
            except DispatchError as error:
                rejected += 1
                print(f"[FAILED] {customer.name} <- {restaurant.name}: {error}")
                continue

            assigned += 1
            print(f"[SUCCESS] {customer.name} <- {restaurant.name}: driver {delivery.driver.name} ({delivery.distance:.2f})")

    # 3. Reports
    print("\n--- Driver Rank Report ---")
    print(rank_report_to_frame(get_driver_rank_report(store)).to_string(index=False))

    for city in store.find_all_cities():
        frame = rank_report_to_frame(get_driver_rank_report_by_city(store, city))
        if frame.empty:
            continue
        print(f"\n--- Driver Rank Report: {city.name} ---")
        print(frame.to_string(index=False))

    print("\n=== RUN COMPLETE ===")
    print(f"Orders Assigned: {assigned} / {assigned + rejected}")


if __name__ == "__main__":
    run_rank_report()
