import numba as nb
import sys

from colorama import Fore, Style


def print_1d_array(arr):
    N = len(arr)
    if N > 5:
        return f"(size={len(arr)}): [{arr[0]:.5g}, {arr[1]:.5g}, ..., {arr[-2]:.5g}, {arr[-1]:.5g}]"
    else:
        text = f"(size={len(arr)}): ["
        for i in range(N):
            text += f"{arr[i]:.5g}, "
        if N > 0:
            text = text[:-2]
        text += "]"
        return text


def print_error(text):
    print(Fore.RED + f"[ERROR]: {text}\n")
    print(Style.RESET_ALL)
    sys.stdout.flush()
    sys.exit()


def print_warning(text):
    print(Fore.YELLOW + f"[WARNING]: {text}\n")
    print(Style.RESET_ALL)
    sys.stdout.flush()


def print_msg(msg):
    print(msg)
    sys.stdout.flush()


def print_banner():
    print(
        "\n"
        + r"  ____  _______  _______ ___ _____ _____ "
        + "\n"
        + r" |  _ \| ____\ \/ / ____|_ _|_   _| ____|"
        + "\n"
        + r" | | | |  _|  \  / |    | |  | | |  _|  "
        + "\n"
        + r" | |_| | |___ /  \ |___ | |  | | | |___ "
        + "\n"
        + r" |____/|_____/_/\_\____|___| |_| |_____|"
        + "\n"
    )
    sys.stdout.flush()


def print_configuration(settings):
    mode = "Python" if nb.config.DISABLE_JIT else "Numba"

    text = ""
    text += f"           Mode | {mode}\n"
    text += f"         Events | {settings.N_event}\n"
    text += f"       RNG seed | {settings.rng_seed}\n"
    print(text)
    sys.stdout.flush()


def print_progress(percent):
    sys.stdout.write("\r")
    sys.stdout.write(" [%-28s] %d%%" % ("=" * int(percent * 28), percent * 100.0))
    sys.stdout.flush()


def print_time(tag, t, percent):
    if t >= 24 * 60 * 60:
        print("   %s | %.2f days (%.1f%%)" % (tag, t / 24 / 60 / 60, percent))
    elif t >= 60 * 60:
        print("   %s | %.2f hours (%.1f%%)" % (tag, t / 60 / 60, percent))
    elif t >= 60:
        print("   %s | %.2f minutes (%.1f%%)" % (tag, t / 60, percent))
    else:
        print("   %s | %.2f seconds (%.1f%%)" % (tag, t, percent))


def print_runtime(runtime):
    total = runtime["total"]
    preparation = runtime["preparation"]
    simulation = runtime["simulation"]
    output = runtime["output"]

    # Guard the percentages for very short runs
    norm = total if total > 0.0 else 1.0

    print("\n Runtime report:")
    print_time("Total      ", total, 100)
    print_time("Preparation", preparation, preparation / norm * 100)
    print_time("Simulation ", simulation, simulation / norm * 100)
    print_time("Output     ", output, output / norm * 100)
    print("\n")
    sys.stdout.flush()


def print_event_summary(N_event, N_failed, N_emitted):
    text = "\n"
    text += f"  Generated events | {N_event - N_failed}\n"
    text += f"     Failed events | {N_failed}\n"
    text += f" Emitted particles | {N_emitted}\n"
    print(text)
    sys.stdout.flush()
