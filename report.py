import json
import numpy as np
import pandas as pd

"""
input name lists and results of a matching: console lines, statistics, csv/json files
"""

COLUMNS = ["advertiser", "person", "ctr"]


"""one name per line, blank lines are empty names, no deduplication, a leading BOM is dropped"""


def read_names(filename):
    with open(filename, "r", encoding="utf-8-sig") as f:
        return f.read().splitlines()


def to_rows(matching):
    rows = []
    for p, a in enumerate(matching.matchP):
        if a is not None:
            rows.append(
                {
                    "advertiser": matching.advertisers[a],
                    "person": matching.people[p],
                    "ctr": float(matching.ctr_matrix[a, p]),
                }
            )
    return rows


def to_frame(matching):
    return pd.DataFrame(to_rows(matching), columns=COLUMNS)


def format_lines(matching, total):
    lines = [
        "<advertiser,person>:<{},{}>".format(advertiser, person)
        for person, advertiser in matching.pairs()
    ]
    lines.append("Max CTR: {}".format(total))
    return lines


def print_result(matching, total):
    for line in format_lines(matching, total):
        print(line)


"""
rank of the matched person in the preference list of each matched advertiser,
0 is the advertiser's favourite
"""


def match_ranks(matching):
    matchA = matching.matchA()
    return [
        None if matchA[a] is None else matching.prefA[a].index(matchA[a])
        for a in range(len(matching.advertisers))
    ]


def statistics(matching, total):
    nb_people = len(matching.people)
    nb_adv = len(matching.advertisers)
    nb_matched = matching.nb_matched()

    ranks = list(filter(lambda r: r is not None, match_ranks(matching)))
    matched_to_favourite = len(list(filter(lambda r: r == 0, ranks)))
    avg_match_rank = 1 + np.average(ranks) if len(ranks) > 0 else None

    return {
        "nb_people": nb_people,
        "nb_advertisers": nb_adv,
        "nb_matched": nb_matched,
        "nb_people_unmatched": nb_people - nb_matched,
        "nb_advertisers_unmatched": nb_adv - nb_matched,
        "matched_to_favourite": matched_to_favourite,
        "avg_match_rank": None if avg_match_rank is None else float(avg_match_rank),
        "total_ctr": float(total),
    }


"""save matching as csv and json"""


def serialize(matching, total, filename):
    rows = to_rows(matching)
    pd.DataFrame(rows, columns=COLUMNS).to_csv(filename + ".csv", sep=";", index=False)

    model = {
        "people": matching.people,
        "advertisers": matching.advertisers,
        "matchP": matching.matchP,
        "pairs": rows,
        "statistics": statistics(matching, total),
    }
    with open(filename + ".json", "w", encoding="utf-8") as f:
        json.dump(model, f, ensure_ascii=False, indent=2)


def deserialize(filename):
    with open(filename + ".json", "r", encoding="utf-8") as f:
        return json.load(f)
