import sys as sys
import matplotlib as mpl
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

import da
import report

"""
draw the CTR matrix of a matching, advertisers on y, people on x,
matched pairs are red dots, unmatched slots are dots on the margin
"""


def draw_matching(matching, title="Matching"):
    ctr_matrix = matching.ctr_matrix
    nbAdvertisers, nbPeople = ctr_matrix.shape
    matchA = matching.matchA()

    fig = plt.figure(figsize=(6, 5), tight_layout=True)
    plt.title(title)

    if ctr_matrix.size > 0:
        cmap = mpl.cm.viridis
        norm = mpl.colors.Normalize(vmin=ctr_matrix.min(), vmax=ctr_matrix.max())
        plt.imshow(ctr_matrix, origin="lower", norm=norm, cmap=cmap)
        plt.colorbar()
    plt.xlabel("people")
    plt.ylabel("advertisers")

    for p in range(nbPeople):
        if matching.matchP[p] is None:
            plt.plot([p], [nbAdvertisers], "r.", markersize=3)
        else:
            plt.plot([p], [matching.matchP[p]], "r.", markersize=3)
    for a in range(nbAdvertisers):
        if matchA[a] is None:
            plt.plot([nbPeople], [a], "r.", markersize=3)

    plt.xlim((-0.5, nbPeople + 0.5))
    plt.ylim((-0.5, nbAdvertisers + 0.5))

    return fig


def draw_ranks(matching):
    """Histogram of the rank of each match in the advertiser's preferences."""
    ranks = [
        1 + matching.prefA[a].index(p)
        for a, p in enumerate(matching.matchA())
        if p is not None
    ]

    fig = plt.figure(figsize=(10, 3), tight_layout=True)
    ax = plt.subplot(1, 1, 1)
    ax.title.set_text("Rank of the matched person in the advertiser's list")
    if len(ranks) > 0:
        plt.hist(ranks, bins=list(range(1, max(ranks) + 2)), align="left")
    plt.xlabel("rank")
    plt.ylabel("advertisers")

    return fig


def save_pdf(matching, filename, title="Matching"):
    with PdfPages(filename) as pdf:
        for fig in (draw_matching(matching, title), draw_ranks(matching)):
            pdf.savefig(fig)
            plt.close(fig)


if __name__ == "__main__":
    if len(sys.argv) < 3 or len(sys.argv) > 4:
        print(
            "Usage: {} advertisers_file people_file [figure.pdf]".format(sys.argv[0]),
            file=sys.stderr,
        )
        sys.exit(2)

    output = sys.argv[3] if len(sys.argv) == 4 else "fig.pdf"
    advertisers = report.read_names(sys.argv[1])
    people = report.read_names(sys.argv[2])

    matching = da.Matching(people, advertisers)
    matching.run()
    save_pdf(matching, output)
    print("Figure saved to " + output)
