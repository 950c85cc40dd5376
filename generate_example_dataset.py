import json
import random
import sys
import uuid

from faker import Faker

from rbset.settings import BENCH_DATASET

records = []
if __name__ == "__main__":
    fake = Faker()
    n = int(sys.argv[1])
    with open(BENCH_DATASET, "wb") as f:
        for i in range(n):
            record = {
                "id": str(uuid.uuid4()),
                "name": fake.name(),
                "country": fake.country(),
            }
            records.append(record)
            data = json.dumps(record) + "\n"
            f.write(data.encode("utf8"))

        # replay some of the ids so the benchmark also measures duplicate inserts
        for record in random.sample(records, k=n // 4):
            data = json.dumps(record) + "\n"
            f.write(data.encode("utf8"))
