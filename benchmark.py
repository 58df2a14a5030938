from record_mapper import Song, create_mapper
import argparse
import time
import random
from faker import Faker


random.seed(42)
fake = Faker()
ALBUMS = [fake.catch_phrase() for _ in range(20)]

def generate_songs(n):
    for _ in range(n):
        yield Song(
            name=fake.sentence(nb_words=3).rstrip("."),
            album=random.choice(ALBUMS),
        )

def inserts(mapper, count):
    insert_start = time.time()
    songs = [mapper.save(song) for song in generate_songs(count)]
    insert_duration = time.time() - insert_start
    print(f"Inserted {count} songs in {insert_duration:.2f} seconds.")
    return songs, insert_duration

def finds(mapper, songs, count):
    names = [random.choice(songs).name for _ in range(count)]

    find_start = time.time()
    for name in names:
        mapper.find_by_name(name)
    find_duration = time.time() - find_start
    print(f"Executed {count} lookups by name in {find_duration:.2f} seconds.")
    return find_duration

def saves(mapper, songs, count):
    sample = random.sample(songs, min(count, len(songs)))

    save_start = time.time()
    for song in sample:
        song.album = random.choice(ALBUMS)
        mapper.save(song)
    save_duration = time.time() - save_start
    print(f"Saved {len(sample)} modified songs in {save_duration:.2f} seconds.")
    return save_duration

def run_benchmark(db_type="sqlite", count=10_000):
    print(f"Running benchmark: type={db_type}, count={count}")

    if db_type == "sqlite":
        mapper = create_mapper("sqlite://", create_schema=True)
    elif db_type == "memory":
        mapper = create_mapper("memory://")
    else:
        raise ValueError("Invalid --type. Use 'sqlite' or 'memory'.")

    songs, elapsed = inserts(mapper, count)
    elapsed += finds(mapper, songs, 500)
    elapsed += saves(mapper, songs, 500)

    assert mapper.storage.count() == count

    print(f"Total runtime for {db_type}: {elapsed:.2f} seconds.")



if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--type", choices=["sqlite", "memory"], required=True)
    parser.add_argument("--count", type=int, default=10_000)
    args = parser.parse_args()
    run_benchmark(args.type, args.count)
