from mempass import generate_password

def main() -> None:
    password = generate_password()  # uses the DEFAULT preset
    print("\n[Memorable Password Generator]")
    print(f"Generated password: {password}\n")

if __name__ == "__main__":
    main()
